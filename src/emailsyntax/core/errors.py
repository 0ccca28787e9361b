"""
Error types for email address parsing and configuration.
"""

from dataclasses import dataclass
from typing import Optional

from .taxonomy import Reason


class EmailSyntaxError(Exception):
    """Base exception for all emailsyntax errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class InvalidEmail(EmailSyntaxError):
    """
    Raised when an address part violates RFC 5321/5322 syntax.

    Carries exactly one :class:`Reason`. Raising it aborts the whole
    part validation; warnings collected so far are meaningless.
    """

    def __init__(
        self,
        reason: Reason,
        context: Optional["ErrorContext"] = None,
        message: str | None = None,
    ):
        self.reason = reason
        super().__init__(message or reason.describe(), context)


class NoTokenError(EmailSyntaxError):
    """Raised when the lexer cursor is read before the first advance."""

    pass


class ConfigError(EmailSyntaxError):
    """
    Raised when validator settings cannot be loaded.

    Examples:
    - Unreadable or malformed TOML file
    - Unknown warning name in ``reject``
    - Wrong value type for ``strict``
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of a failure inside the text being parsed.

    Attributes:
        text: The address part that was being walked
        offset: 0-based character offset of the offending token
    """

    text: str
    offset: int

    def format(self) -> str:
        """
        Format the context as the text with a caret under the offset.

        Control characters are shown as ``?`` so the caret stays aligned.
        """
        visible = "".join(ch if ch.isprintable() else "?" for ch in self.text)
        return f"  {visible}\n  {' ' * self.offset}^"


def make_invalid_email(reason: Reason, text: str, offset: int) -> InvalidEmail:
    """
    Helper to create an InvalidEmail with context.

    Args:
        reason: Failure kind
        text: Address part being parsed
        offset: 0-based offset of the offending token

    Returns:
        InvalidEmail with context attached
    """
    context = ErrorContext(text=text, offset=offset)
    return InvalidEmail(reason, context)
