"""Core form-object infrastructure.

Contains the form type descriptor and its builder, the FormObject base
class, input normalization and naming helpers.
"""

from form_object.core.config import FormConfig, FormConfigBuilder, Outcome, extend
from form_object.core.errors import (
    FormClassNotFoundError,
    FormObjectError,
    InvalidArgumentError,
)
from form_object.core.form import FormObject
from form_object.core.models import ProcessingResult
from form_object.core.naming import humanize, underscore
from form_object.core.params import is_blank, is_present, normalize_params

__all__ = [
    # Configuration
    "FormConfig",
    "FormConfigBuilder",
    "Outcome",
    "extend",
    # Errors
    "FormClassNotFoundError",
    "FormObjectError",
    "InvalidArgumentError",
    # Form
    "FormObject",
    "ProcessingResult",
    # Helpers
    "humanize",
    "underscore",
    "is_blank",
    "is_present",
    "normalize_params",
]
