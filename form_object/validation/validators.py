"""Validators that populate a form's error collection.

Each validator conforms to the FormValidator protocol and is attached to a
form type through its FormConfig. The form runs them in declaration order.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import jsonschema
from pydantic import BaseModel, ValidationError

from form_object.validation.models import BASE, Errors

if TYPE_CHECKING:
    from form_object.core.form import FormObject


@runtime_checkable
class FormValidator(Protocol):
    """Protocol for validation collaborators.

    A validator inspects the form and records problems on the errors
    collection. It must not raise for invalid data.
    """

    def validate(self, form: "FormObject", errors: Errors) -> None:
        """Record validation errors for the form.

        Args:
            form: The form being validated.
            errors: The form's error collection to append to.
        """
        ...


def _present_values(form: "FormObject") -> dict[str, Any]:
    """Collect declared field values that are set (not None)."""
    values = {}
    for name in form.form_config.field_names:
        value = form[name]
        if value is not None:
            values[name] = value
    return values


class ModelValidator:
    """Validate field values against a pydantic model."""

    def __init__(self, model: type[BaseModel]) -> None:
        self.model = model

    def __repr__(self) -> str:
        return f"ModelValidator({self.model.__name__})"

    def validate(self, form: "FormObject", errors: Errors) -> None:
        try:
            self.model.model_validate(_present_values(form))
        except ValidationError as e:
            for error in e.errors():
                loc = error.get("loc") or ()
                field = str(loc[0]) if loc else BASE
                errors.add(field, error["msg"], code=error.get("type"))


class JsonSchemaValidator:
    """Validate field values against a JSON Schema document."""

    def __init__(self, schema: dict[str, Any]) -> None:
        jsonschema.validators.validator_for(schema).check_schema(schema)
        self.schema = schema
        self._validator = jsonschema.validators.validator_for(schema)(schema)

    def __repr__(self) -> str:
        title = self.schema.get("title", "schema")
        return f"JsonSchemaValidator({title})"

    def validate(self, form: "FormObject", errors: Errors) -> None:
        payload = _present_values(form)
        for error in self._validator.iter_errors(payload):
            errors.add(self._field_for(error), error.message, code=error.validator)

    def _field_for(self, error: jsonschema.ValidationError) -> str:
        if error.path:
            return str(error.path[0])
        if error.validator == "required":
            # Message format: "'email' is a required property"
            for name in error.validator_value:
                if f"'{name}'" in error.message:
                    return name
        return BASE


class MethodValidator:
    """Call a named method on the form; the method records its own errors."""

    def __init__(self, method_name: str) -> None:
        self.method_name = method_name

    def __repr__(self) -> str:
        return f"MethodValidator({self.method_name})"

    def validate(self, form: "FormObject", errors: Errors) -> None:
        getattr(form, self.method_name)()
