"""
Validator settings loaded from ``emailsyntax.toml``.

Example file::

    [validator]
    strict = false
    reject = ["deprecated_quoted_pair", "rfc5322_domain_literal"]

``EMAILSYNTAX_STRICT`` in the environment overrides ``strict``.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .core.errors import ConfigError
from .core.taxonomy import EmailWarning

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "emailsyntax.toml"
STRICT_ENV_VAR = "EMAILSYNTAX_STRICT"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ValidatorSettings:
    """
    Policy applied on top of the syntax rules.

    Attributes:
        strict: Reject any address that produced a warning
        reject: Warnings that reject an address even when not strict
    """

    strict: bool = False
    reject: frozenset[EmailWarning] = frozenset()

    def rejected_warnings(self, warnings: Iterable[EmailWarning]) -> list[EmailWarning]:
        """Warnings that turn an otherwise valid address into a rejection, deduplicated."""
        unique = list(dict.fromkeys(warnings))
        if self.strict:
            return unique
        return [warning for warning in unique if warning in self.reject]


def load_settings(path: Path | None = None) -> ValidatorSettings:
    """
    Load validator settings.

    Looks for ``emailsyntax.toml`` in the working directory when no path is
    given. A missing default file yields default settings; a missing
    explicit file is an error.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values
    """
    if path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        path = candidate if candidate.exists() else None
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    data: dict = {}
    if path is not None:
        logger.debug("Loading validator settings from %s", path)
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e

    table = data.get("validator", {})
    if not isinstance(table, dict):
        raise ConfigError("[validator] must be a table")

    strict = table.get("strict", False)
    if not isinstance(strict, bool):
        raise ConfigError(f"validator.strict must be a boolean, got {strict!r}")

    env_strict = os.getenv(STRICT_ENV_VAR)
    if env_strict is not None:
        strict = _parse_bool(env_strict)

    return ValidatorSettings(strict=strict, reject=_parse_reject(table.get("reject", [])))


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{STRICT_ENV_VAR} must be a boolean, got {value!r}")


def _parse_reject(names: object) -> frozenset[EmailWarning]:
    if not isinstance(names, list):
        raise ConfigError(f"validator.reject must be a list, got {names!r}")
    warnings = set()
    for name in names:
        try:
            warnings.add(EmailWarning(name))
        except ValueError:
            valid = ", ".join(warning.value for warning in EmailWarning)
            raise ConfigError(
                f"Unknown warning {name!r} in validator.reject (valid: {valid})"
            ) from None
    return frozenset(warnings)
