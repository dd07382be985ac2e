"""Serializable output models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProcessingResult(BaseModel):
    """Outcome of processing one submission through a form.

    Contains the form's present attributes and its validation messages.
    """

    model_name: str
    valid: bool
    attributes: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, list[str]] = Field(default_factory=dict)
    full_messages: list[str] = Field(default_factory=list)

    model_config = ConfigDict(protected_namespaces=())
