"""Validation error collection.

Errors are data, not exceptions: validators append FieldError entries to an
Errors collection which the form exposes unchanged to callers for display.
"""

from collections.abc import Callable, Iterator

from pydantic import BaseModel

BASE = "base"


class FieldError(BaseModel):
    """A single validation message attached to a field (or to 'base')."""

    field: str
    message: str
    code: str | None = None


class Errors:
    """Ordered collection of validation errors keyed by field.

    Reading an unknown field returns an empty list rather than raising.
    """

    def __init__(self) -> None:
        self._errors: list[FieldError] = []

    def add(self, field: str, message: str, code: str | None = None) -> FieldError:
        """Record an error against a field.

        Args:
            field: Field identifier, or "base" for form-wide errors.
            message: Human-readable message (without the field label).
            code: Optional machine-readable error code.

        Returns:
            The recorded FieldError.
        """
        error = FieldError(field=field, message=message, code=code)
        self._errors.append(error)
        return error

    def __getitem__(self, field: str) -> list[str]:
        return [e.message for e in self._errors if e.field == field]

    def __contains__(self, field: object) -> bool:
        return any(e.field == field for e in self._errors)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(list(self._errors))

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"Errors({self.messages!r})"

    @property
    def messages(self) -> dict[str, list[str]]:
        """Map each field with errors to its messages, in first-seen order."""
        result: dict[str, list[str]] = {}
        for error in self._errors:
            result.setdefault(error.field, []).append(error.message)
        return result

    def full_messages(self, label_for: Callable[[str], str] | None = None) -> list[str]:
        """Return messages prefixed with a field label.

        Args:
            label_for: Maps a field identifier to its display label. Defaults
                to the identifier itself.

        Returns:
            One string per error. Errors on "base" are not prefixed.
        """
        messages = []
        for error in self._errors:
            if error.field == BASE:
                messages.append(error.message)
                continue
            label = label_for(error.field) if label_for else error.field
            messages.append(f"{label} {error.message}")
        return messages

    def clear(self) -> None:
        """Remove all recorded errors."""
        self._errors.clear()

    def to_dict(self) -> dict[str, list[str]]:
        """Alias of messages, for serialization."""
        return self.messages
