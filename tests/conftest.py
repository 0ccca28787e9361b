"""Shared pytest fixtures for emailsyntax tests."""

import pytest

from emailsyntax.validator import EmailValidator


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's EMAILSYNTAX_STRICT out of the tests."""
    monkeypatch.delenv("EMAILSYNTAX_STRICT", raising=False)


@pytest.fixture
def validator() -> EmailValidator:
    """Return a validator with default settings."""
    return EmailValidator()
