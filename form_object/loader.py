"""Resolve form classes from ``module:ClassName`` references."""

import importlib

from form_object.core.errors import FormClassNotFoundError
from form_object.core.form import FormObject


def load_form_class(reference: str) -> type[FormObject]:
    """Import a FormObject subclass by reference.

    Args:
        reference: "package.module:ClassName" (a dotted path after the colon
            is followed through nested attributes).

    Returns:
        The form class.

    Raises:
        FormClassNotFoundError: If the module or attribute cannot be found,
            or the attribute is not a FormObject subclass.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise FormClassNotFoundError(reference, "expected 'module:ClassName'")

    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise FormClassNotFoundError(reference, str(e)) from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise FormClassNotFoundError(reference, f"no attribute {attr!r}") from e

    if not (isinstance(target, type) and issubclass(target, FormObject)):
        raise FormClassNotFoundError(reference, "not a FormObject subclass")
    return target
