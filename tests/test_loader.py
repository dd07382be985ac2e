"""Tests for form class loading."""

import pytest

from form_object import FormClassNotFoundError
from form_object.loader import load_form_class
from sample_forms import SignupForm


class TestLoadFormClass:
    """Tests for load_form_class()."""

    def test_load_by_reference(self) -> None:
        """Test a module:Class reference resolves."""
        assert load_form_class("sample_forms:SignupForm") is SignupForm

    @pytest.mark.parametrize(
        "reference",
        [
            "sample_forms",
            "sample_forms:",
            ":SignupForm",
            "no_such_module_xyz:Form",
            "sample_forms:MissingForm",
            "sample_forms:NotAForm",
            "sample_forms:ContactSchema",
        ],
    )
    def test_invalid_references(self, reference: str) -> None:
        """Test unresolvable references raise FormClassNotFoundError."""
        with pytest.raises(FormClassNotFoundError) as exc_info:
            load_form_class(reference)

        assert exc_info.value.reference == reference
        assert reference in str(exc_info.value)
