"""FormObject base class.

A form object accepts raw, untyped request input, assigns it to declared
fields, cleans it, applies defaults, validates it and dispatches outcome
hooks. Subclasses describe themselves with a FormConfig and override the
hook methods:

- after_initialize(*args, **kwargs): instance setup
- clean_data(): primary cleaning logic
- process_valid() / process_invalid() / process_always(): side effects
"""

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from form_object.core.config import FormConfig, Outcome
from form_object.core.models import ProcessingResult
from form_object.core.naming import humanize, underscore
from form_object.core.params import canonical_key, is_blank, is_present, normalize_params
from form_object.validation.models import Errors

logger = logging.getLogger(__name__)


class FormObject:
    """Base class for declarative form objects."""

    form_config: ClassVar[FormConfig] = FormConfig()

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        # One slot per declared field, read at construction so subclass
        # configs contribute their own fields.
        object.__setattr__(
            self, "_fields", {name: None for name in self.form_config.field_names}
        )
        self.errors = Errors()
        self.params: dict[str, Any] = {}

        self.after_initialize(*args, **kwargs)

    # Field access

    def __getattr__(self, name: str) -> Any:
        fields = self.__dict__.get("_fields")
        if fields is not None and name in fields:
            return fields[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        fields = self.__dict__.get("_fields")
        if fields is not None and name in fields:
            fields[name] = value
        else:
            object.__setattr__(self, name, value)

    def __getitem__(self, name: str) -> Any:
        """Read a declared field; undeclared names read as None."""
        return self._fields.get(canonical_key(name))

    def __setitem__(self, name: str, value: Any) -> None:
        """Write a declared field; undeclared names are ignored."""
        name = canonical_key(name)
        if name in self._fields:
            self._fields[name] = value

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self._fields.items())
        return f"{type(self).__name__}({values})"

    @property
    def raw_params(self) -> dict[str, Any]:
        """The canonical input passed to the last process() call."""
        return self.params

    # Naming

    @classmethod
    def model_name(cls) -> str:
        """Namespace key under which this form's input is submitted."""
        return cls.form_config.model_name or underscore(cls.__name__)

    @classmethod
    def human_attribute_name(cls, field: str) -> str:
        """Display label for a field."""
        return cls.form_config.labels.get(field) or humanize(field)

    # Processing

    def process(self, request_params: Mapping[Any, Any] | None) -> bool:
        """Load, clean, default, validate and dispatch.

        Args:
            request_params: Raw input keyed first by the form's model name,
                then by field name.

        Returns:
            True if the form validated, False otherwise. Exceptions raised by
            hooks, cleaners or processors propagate unchanged.
        """
        config = self.form_config
        model_name = self.model_name()

        namespace = normalize_params(request_params).get(model_name)
        if namespace is not None and not isinstance(namespace, Mapping):
            logger.warning(
                "Ignoring %s input for %s: expected a mapping",
                type(namespace).__name__,
                model_name,
            )
            namespace = None
        self.params = normalize_params(namespace)

        for field in config.field_names:
            value = self.params.get(field)
            if not is_blank(value):
                self._fields[field] = value
        logger.debug("Loaded %s fields: %s", model_name, sorted(self.params))

        self.clean_data()
        self._send_all(config.cleaners)

        for field, value in config.defaults.items():
            if is_blank(self[field]):
                self[field] = copy.deepcopy(value)

        valid = self.validate()
        logger.debug("Validated %s: valid=%s errors=%s", model_name, valid, self.errors.messages)

        if valid:
            self.process_valid()
            self._send_all(config.processors_for(Outcome.VALID))
        else:
            self.process_invalid()
            self._send_all(config.processors_for(Outcome.INVALID))
        self.process_always()
        self._send_all(config.processors_for(Outcome.ALWAYS))

        return valid

    def validate(self) -> bool:
        """Run the validator chain and return whether the form is valid."""
        self.errors.clear()
        for validator in self.form_config.validators:
            validator.validate(self, self.errors)
        return not self.errors

    def is_valid(self) -> bool:
        """Alias of validate()."""
        return self.validate()

    def _send_all(self, method_names: Iterable[str]) -> None:
        for method_name in method_names:
            logger.debug("Calling %s.%s", type(self).__name__, method_name)
            getattr(self, method_name)()

    # Snapshots

    def attributes(self) -> dict[str, Any]:
        """Return declared fields with present values, in declared order."""
        return {name: value for name, value in self._fields.items() if is_present(value)}

    def full_messages(self) -> list[str]:
        """Validation messages prefixed with human field names."""
        return self.errors.full_messages(self.human_attribute_name)

    def to_result(self) -> ProcessingResult:
        """Summarize the current state as a serializable result."""
        return ProcessingResult(
            model_name=self.model_name(),
            valid=not self.errors,
            attributes=self.attributes(),
            errors=self.errors.messages,
            full_messages=self.full_messages(),
        )

    # Rendering-layer conventions

    def persisted(self) -> bool:
        """Form objects are never backed by a stored record."""
        return False

    def to_model(self) -> "FormObject":
        return self

    def to_key(self) -> None:
        return None

    def to_param(self) -> None:
        return None

    # Hooks

    def after_initialize(self, *args: Any, **kwargs: Any) -> None:
        """Override with any extra set-up required."""

    def clean_data(self) -> None:
        """Override with any custom data processing or cleansing."""

    def process_valid(self) -> None:
        """Override with side effects of a valid submission."""

    def process_invalid(self) -> None:
        """Override with anything that must run when the form is invalid."""

    def process_always(self) -> None:
        """Override with anything that must run whether valid or not."""
