"""Pipeline helpers for processing many submissions."""

from form_object.core.models import ProcessingResult
from form_object.pipeline.batch import process_batch

__all__ = [
    "ProcessingResult",
    "process_batch",
]
