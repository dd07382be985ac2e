"""Form type configuration.

A FormConfig is the immutable descriptor shared by every instance of a form
type: declared fields, cleaners, outcome processors, defaults and the
validator chain. It is assembled once, at class definition time, with a
FormConfigBuilder:

    class SignupForm(FormObject):
        form_config = (
            FormConfigBuilder()
            .fields("name", "email")
            .add_cleaner("strip_email")
            .add_processor("send_welcome", "valid")
            .defaults(email="n/a")
            .build()
        )

Reusable behaviour is composed with ``include``: an extension is any
callable that takes the builder and appends its own declarations.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

import jsonschema
from pydantic import BaseModel, ConfigDict, Field, field_validator

from form_object.core.errors import InvalidArgumentError
from form_object.core.params import canonical_key
from form_object.validation.validators import (
    FormValidator,
    JsonSchemaValidator,
    MethodValidator,
    ModelValidator,
)


class Outcome(str, Enum):
    """Validation outcome a processor is registered against."""

    VALID = "valid"
    INVALID = "invalid"
    ALWAYS = "always"

    @classmethod
    def parse(cls, value: "Outcome | str") -> "Outcome":
        """Coerce a string or Outcome into an Outcome.

        Raises:
            InvalidArgumentError: If the value is not a known outcome.
        """
        if isinstance(value, Outcome):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(f"Invalid processor type {value!r}") from None


class FormConfig(BaseModel):
    """Immutable descriptor of a form type."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        protected_namespaces=(),
    )

    field_names: tuple[str, ...] = ()
    cleaners: tuple[str, ...] = ()
    valid_processors: tuple[str, ...] = ()
    invalid_processors: tuple[str, ...] = ()
    always_processors: tuple[str, ...] = ()
    defaults: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    validators: tuple[Any, ...] = ()
    model_name: str | None = None
    labels: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("defaults", "labels", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    def processors_for(self, outcome: Outcome | str) -> tuple[str, ...]:
        """Return the processor names registered for an outcome."""
        outcome = Outcome.parse(outcome)
        if outcome is Outcome.VALID:
            return self.valid_processors
        if outcome is Outcome.INVALID:
            return self.invalid_processors
        return self.always_processors

    def has_field(self, name: str) -> bool:
        """Check whether a field name is declared."""
        return name in self.field_names

    def to_builder(self) -> "FormConfigBuilder":
        """Return a builder seeded with this configuration."""
        return FormConfigBuilder.from_config(self)


Extension = Callable[["FormConfigBuilder"], Any]


class FormConfigBuilder:
    """Mutable builder for FormConfig.

    Every declaration method returns the builder so calls can be chained.
    Nothing is de-duplicated except field names: registering the same cleaner
    or processor twice invokes it twice.
    """

    def __init__(self) -> None:
        self._field_names: list[str] = []
        self._cleaners: list[str] = []
        self._processors: dict[Outcome, list[str]] = {outcome: [] for outcome in Outcome}
        self._defaults: dict[str, Any] = {}
        self._validators: list[FormValidator] = []
        self._model_name: str | None = None
        self._labels: dict[str, str] = {}

    @classmethod
    def from_config(cls, config: FormConfig) -> "FormConfigBuilder":
        """Create a builder pre-populated from an existing config.

        Used by subclasses that extend their parent's declarations.
        """
        builder = cls()
        builder._field_names = list(config.field_names)
        builder._cleaners = list(config.cleaners)
        for outcome in Outcome:
            builder._processors[outcome] = list(config.processors_for(outcome))
        builder._defaults = dict(config.defaults)
        builder._validators = list(config.validators)
        builder._model_name = config.model_name
        builder._labels = dict(config.labels)
        return builder

    def fields(self, *names: str) -> "FormConfigBuilder":
        """Declare permitted input fields, in order."""
        for name in names:
            name = canonical_key(name)
            if name not in self._field_names:
                self._field_names.append(name)
        return self

    def add_cleaner(self, method_name: str) -> "FormConfigBuilder":
        """Register a cleaning method, run after clean_data()."""
        self._cleaners.append(str(method_name))
        return self

    def add_processor(
        self,
        method_name: str,
        outcome: Outcome | str = Outcome.VALID,
    ) -> "FormConfigBuilder":
        """Register a processor method for an outcome.

        Args:
            method_name: Name of a zero-argument method on the form.
            outcome: One of "valid", "invalid" or "always".

        Raises:
            InvalidArgumentError: If outcome is not a known outcome.
        """
        self._processors[Outcome.parse(outcome)].append(str(method_name))
        return self

    def defaults(
        self,
        values: Mapping[Any, Any] | None = None,
        **kwargs: Any,
    ) -> "FormConfigBuilder":
        """Merge default values; later declarations win per key.

        Keys are canonicalized the same way as input keys, so enum members
        and strings name the same field.
        """
        if values:
            self._defaults.update({canonical_key(k): v for k, v in values.items()})
        self._defaults.update(kwargs)
        return self

    def validate_with(self, validator: FormValidator) -> "FormConfigBuilder":
        """Append a validator to the validation chain."""
        if not isinstance(validator, FormValidator):
            raise InvalidArgumentError(
                f"{validator!r} does not implement validate(form, errors)"
            )
        self._validators.append(validator)
        return self

    def schema(self, model: type[BaseModel]) -> "FormConfigBuilder":
        """Validate field values with a pydantic model."""
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise InvalidArgumentError(f"{model!r} is not a pydantic model class")
        return self.validate_with(ModelValidator(model))

    def json_schema(self, schema: dict[str, Any]) -> "FormConfigBuilder":
        """Validate field values with a JSON Schema document."""
        try:
            validator = JsonSchemaValidator(schema)
        except jsonschema.SchemaError as e:
            raise InvalidArgumentError(f"Invalid JSON schema: {e.message}") from e
        return self.validate_with(validator)

    def validate(self, method_name: str) -> "FormConfigBuilder":
        """Validate with a named form method that records its own errors."""
        return self.validate_with(MethodValidator(str(method_name)))

    def model_name(self, name: str) -> "FormConfigBuilder":
        """Override the namespace key used to find this form's input."""
        self._model_name = str(name)
        return self

    def labels(
        self,
        values: Mapping[Any, str] | None = None,
        **kwargs: str,
    ) -> "FormConfigBuilder":
        """Set human-readable field labels used in full error messages."""
        if values:
            self._labels.update({canonical_key(k): v for k, v in values.items()})
        self._labels.update(kwargs)
        return self

    def include(self, *extensions: Extension) -> "FormConfigBuilder":
        """Apply extensions to this builder, in argument order."""
        for extension in extensions:
            extension(self)
        return self

    def build(self) -> FormConfig:
        """Freeze the declarations into a FormConfig.

        Raises:
            InvalidArgumentError: If a default targets an undeclared field.
        """
        undeclared = [name for name in self._defaults if name not in self._field_names]
        if undeclared:
            raise InvalidArgumentError(
                f"Defaults declared for undeclared fields: {', '.join(undeclared)}"
            )

        return FormConfig(
            field_names=tuple(self._field_names),
            cleaners=tuple(self._cleaners),
            valid_processors=tuple(self._processors[Outcome.VALID]),
            invalid_processors=tuple(self._processors[Outcome.INVALID]),
            always_processors=tuple(self._processors[Outcome.ALWAYS]),
            defaults=dict(self._defaults),
            validators=tuple(self._validators),
            model_name=self._model_name,
            labels=dict(self._labels),
        )


def extend(config: FormConfig, *extensions: Extension) -> FormConfigBuilder:
    """Start a builder from a parent config and apply extensions to it."""
    return FormConfigBuilder.from_config(config).include(*extensions)
