"""
emailsyntax - RFC 5321/5322 email address syntax validation.

Tells hard syntax errors (address rejected) apart from deprecated or
unusual forms (address accepted, warnings reported).
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .config import ValidatorSettings, load_settings
from .core.errors import ConfigError, EmailSyntaxError, InvalidEmail
from .core.result import ValidationResult
from .core.taxonomy import EmailWarning, Reason
from .validator import EmailValidator, is_valid, validate


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("emailsyntax")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ConfigError",
    "EmailSyntaxError",
    "EmailValidator",
    "EmailWarning",
    "InvalidEmail",
    "Reason",
    "ValidationResult",
    "ValidatorSettings",
    "is_valid",
    "load_settings",
    "validate",
]
