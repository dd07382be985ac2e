"""Pytest configuration and shared fixtures."""

import pytest

from sample_forms import Form, RecordingForm, SignupForm


@pytest.fixture
def hook_log() -> list[str]:
    """Shared list that RecordingForm hooks append to."""
    return []


@pytest.fixture
def recording_form(hook_log: list[str]) -> RecordingForm:
    """A RecordingForm writing to the shared hook log."""
    return RecordingForm(hook_log)


@pytest.fixture
def simple_form() -> Form:
    """A form with fields name/email and an email default."""
    return Form()


@pytest.fixture
def signup_form() -> SignupForm:
    """A form validated with a pydantic model."""
    return SignupForm()
