"""
Validation result model.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .taxonomy import EmailWarning, Reason


class ValidationResult(BaseModel):
    """
    Outcome of validating one address.

    A rejected address carries either a syntax ``reason`` or, when the
    rejection comes from strict mode or the ``reject`` list, the
    offending warnings in ``rejected``. Warnings of a syntax failure
    are never reported.

    Examples:
        - ValidationResult(address="a@b.c", valid=True)
        - ValidationResult(address="a..b@c", valid=False, reason=Reason.CONSECUTIVE_DOTS)
    """

    model_config = ConfigDict(frozen=True)

    address: str
    valid: bool
    local_part: str | None = None
    domain_part: str | None = None
    warnings: list[EmailWarning] = Field(default_factory=list)
    rejected: list[EmailWarning] = Field(default_factory=list)
    reason: Reason | None = None
    detail: str | None = None

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)
