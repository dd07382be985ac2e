"""Exception hierarchy for form-object."""


class FormObjectError(Exception):
    """Base class for all form-object errors."""

    pass


class InvalidArgumentError(FormObjectError, ValueError):
    """Raised when a form declaration receives an unusable argument.

    Declaration errors surface while the form class is being defined, so
    they are fatal to loading the module that declares the form.
    """

    pass


class FormClassNotFoundError(FormObjectError):
    """Raised when a form class reference cannot be resolved."""

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"Cannot load form class {reference!r}: {reason}")
