"""
Email address validation façade.

Splits an address at its separating ``@``, runs the local-part and
domain-part walkers on fresh lexers, merges their warnings and applies
the configured policy.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from .config import ValidatorSettings
from .core.errors import InvalidEmail, make_invalid_email
from .core.lexer import Lexer
from .core.parser_impl import DomainPartWalker, LocalPartWalker, PartWalker
from .core.result import ValidationResult
from .core.taxonomy import EmailWarning, Reason

logger = logging.getLogger(__name__)


class EmailValidator:
    """
    Validates addresses against RFC 5321/5322 syntax.

    ``validate`` returns a fresh result per call. The ``warnings``,
    ``error`` and ``has_warnings`` accessors describe the most recent
    call only.
    """

    def __init__(
        self,
        settings: ValidatorSettings | None = None,
        *,
        strict: bool | None = None,
    ):
        """
        Initialize validator.

        Args:
            settings: Policy settings (defaults to non-strict, nothing rejected)
            strict: Shortcut overriding ``settings.strict``
        """
        self.settings = settings or ValidatorSettings()
        if strict is not None:
            self.settings = replace(self.settings, strict=strict)
        self.local_part_walker: PartWalker = LocalPartWalker()
        self.domain_part_walker: PartWalker = DomainPartWalker()
        self._last: ValidationResult | None = None

    def validate(self, address: str) -> ValidationResult:
        """Validate one address."""
        separator = address.rfind("@")
        local_part = address[:separator] if separator >= 0 else None
        domain_part = address[separator + 1 :] if separator >= 0 else None

        try:
            warnings = self._walk(address, separator)
        except InvalidEmail as e:
            logger.debug("Rejected %r: %s", address, e.reason.value)
            result = ValidationResult(
                address=address,
                valid=False,
                local_part=local_part,
                domain_part=domain_part,
                reason=e.reason,
                detail=str(e),
            )
        else:
            rejected = self.settings.rejected_warnings(warnings)
            if rejected:
                logger.debug(
                    "Rejected %r by policy: %s",
                    address,
                    ", ".join(warning.value for warning in rejected),
                )
            result = ValidationResult(
                address=address,
                valid=not rejected,
                local_part=local_part,
                domain_part=domain_part,
                warnings=warnings,
                rejected=rejected,
                detail=f"Rejected warnings: {', '.join(w.value for w in rejected)}"
                if rejected
                else None,
            )

        self._last = result
        return result

    def _walk(self, address: str, separator: int) -> list[EmailWarning]:
        if separator < 0:
            raise make_invalid_email(Reason.NO_DOMAIN_PART, address, len(address))

        # Both parts keep the separator: it ends the local part and opens the domain
        warnings = self.local_part_walker.walk(Lexer(address[: separator + 1]))
        warnings.extend(self.domain_part_walker.walk(Lexer(address[separator:])))
        return warnings

    def is_valid(self, address: str) -> bool:
        """Validate one address and return only the verdict."""
        return self.validate(address).valid

    @property
    def warnings(self) -> list[EmailWarning]:
        """Warnings of the last validated address."""
        return list(self._last.warnings) if self._last else []

    @property
    def error(self) -> Reason | None:
        """Failure reason of the last validated address."""
        return self._last.reason if self._last else None

    def has_warnings(self) -> bool:
        return bool(self.warnings)


def validate(address: str, strict: bool = False) -> ValidationResult:
    """
    Convenience function to validate one address with default settings.

    Args:
        address: Address to check
        strict: Reject addresses that produce any warning

    Returns:
        ValidationResult for the address
    """
    return EmailValidator(strict=strict).validate(address)


def is_valid(address: str, strict: bool = False) -> bool:
    """Convenience function returning only the verdict."""
    return validate(address, strict=strict).valid
