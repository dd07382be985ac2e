"""form-object: declarative form objects with cleaning, defaults and validation."""

__version__ = "0.1.0"

from form_object.core import (
    FormClassNotFoundError,
    FormConfig,
    FormConfigBuilder,
    FormObject,
    FormObjectError,
    InvalidArgumentError,
    Outcome,
    ProcessingResult,
    extend,
)
from form_object.pipeline import process_batch
from form_object.validation import (
    Errors,
    FieldError,
    FormValidator,
    JsonSchemaValidator,
    MethodValidator,
    ModelValidator,
)

__all__ = [
    "__version__",
    "Errors",
    "FieldError",
    "FormClassNotFoundError",
    "FormConfig",
    "FormConfigBuilder",
    "FormObject",
    "FormObjectError",
    "FormValidator",
    "InvalidArgumentError",
    "JsonSchemaValidator",
    "MethodValidator",
    "ModelValidator",
    "Outcome",
    "ProcessingResult",
    "extend",
    "process_batch",
]
