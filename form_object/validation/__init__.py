"""Validation collaborators and the error collection they populate."""

from form_object.validation.models import BASE, Errors, FieldError
from form_object.validation.validators import (
    FormValidator,
    JsonSchemaValidator,
    MethodValidator,
    ModelValidator,
)

__all__ = [
    "BASE",
    "Errors",
    "FieldError",
    "FormValidator",
    "JsonSchemaValidator",
    "MethodValidator",
    "ModelValidator",
]
