"""
Shared grammar rules for the local-part and domain-part walkers.

Every rule works on the current token of the walker's lexer and may
consume tokens through ``advance`` or ``find``. Warnings are appended to
the list passed in; hard failures are raised as ``InvalidEmail``.
"""

from typing import Protocol, runtime_checkable

from ..errors import InvalidEmail, make_invalid_email
from ..lexer import Lexer, Token, TokenType
from ..taxonomy import EmailWarning, Reason

FWS_TYPES = frozenset(
    {TokenType.HTAB, TokenType.SP, TokenType.CR, TokenType.LF, TokenType.CRLF}
)


@runtime_checkable
class PartWalker(Protocol):
    """
    Interface of a grammar walker for one address part.

    A walker receives a fresh lexer over its part, consumes it completely
    and returns the warnings it collected, or raises ``InvalidEmail``.
    """

    def walk(self, lexer: Lexer) -> list[EmailWarning]: ...


def fail(lexer: Lexer, reason: Reason, token: Token | None = None) -> InvalidEmail:
    """Build the failure for ``reason`` located at ``token`` (default: current)."""
    target = token or lexer.current()
    return make_invalid_email(reason, lexer.text, target.position)


def escaped(lexer: Lexer) -> bool:
    """True if the current token is escaped by a preceding backslash."""
    return (
        lexer.previous().type is TokenType.BACKSLASH
        and lexer.current().type is not TokenType.GENERIC
    )


def check_double_quote(
    lexer: Lexer, warnings: list[EmailWarning], has_closing_quote: bool
) -> bool:
    """
    Handle a double quote opening a quoted string.

    Does nothing unless the current token is an unclosed ``"``. Otherwise
    the quoted body is skipped and the cursor lands on the closing quote.

    Returns:
        Whether a closing quote has been found

    Raises:
        InvalidEmail: UNCLOSED_DOUBLE_QUOTE if no closing quote follows
    """
    if lexer.current().type is not TokenType.DQUOTE:
        return has_closing_quote

    if has_closing_quote:
        return has_closing_quote

    # TODO: reject a quote with address text on both sides once the
    # obs-local-part word rules are settled; the local-part walker
    # covers the common case before calling this rule.

    warnings.append(EmailWarning.RFC5321_QUOTED_STRING)
    if not lexer.find(TokenType.DQUOTE):
        raise fail(lexer, Reason.UNCLOSED_DOUBLE_QUOTE)
    return True


def parse_comment(lexer: Lexer, warnings: list[EmailWarning]) -> None:
    """
    Skip a parenthesized comment starting at the current ``(``.

    The cursor lands on the first ``)`` after the opening one.

    Raises:
        InvalidEmail: UNCLOSED_COMMENT, or ATEXT_AFTER_COMMENT
    """
    if not lexer.find(TokenType.CLOSEPARENTHESIS):
        raise fail(lexer, Reason.UNCLOSED_COMMENT)

    warnings.append(EmailWarning.CFWS_COMMENT)
    check_comment_end(lexer, warnings)


def check_comment_end(lexer: Lexer, warnings: list[EmailWarning]) -> None:
    """Check what follows the ``)`` under the cursor."""
    if lexer.is_next_token(TokenType.GENERIC):
        raise fail(lexer, Reason.ATEXT_AFTER_COMMENT, lexer.peek_token())

    if lexer.is_next_token(TokenType.AT):
        warnings.append(EmailWarning.DEPRECATED_CFWS_NEAR_AT)


def check_consecutive_dots(lexer: Lexer) -> None:
    """Reject two dots in a row."""
    if lexer.current().type is TokenType.DOT and lexer.is_next_token(TokenType.DOT):
        raise fail(lexer, Reason.CONSECUTIVE_DOTS, lexer.peek_token())


def is_fws(lexer: Lexer) -> bool:
    """True if the current token starts folding whitespace."""
    if escaped(lexer):
        return False
    return lexer.current().type in FWS_TYPES


def check_crlf_in_fws(lexer: Lexer) -> None:
    """A CRLF inside FWS must be followed by a space or tab."""
    if lexer.current().type is not TokenType.CRLF:
        return

    if lexer.is_next_token(TokenType.CRLF):
        raise fail(lexer, Reason.CONSECUTIVE_CRLF, lexer.peek_token())

    if not lexer.is_next_token(TokenType.SP, TokenType.HTAB):
        raise fail(lexer, Reason.CRLF_AT_END)


def parse_fws(lexer: Lexer, warnings: list[EmailWarning]) -> None:
    """
    Validate the folding whitespace token under the cursor.

    Structural checks on the fold come first; the first rule that applies
    decides the outcome.

    Raises:
        InvalidEmail: CONSECUTIVE_CRLF, CRLF_AT_END, CR_WITHOUT_LF,
            ATEXT_AFTER_CFWS or EXPECTED_CTEXT
    """
    previous = lexer.previous()
    current = lexer.current()

    check_crlf_in_fws(lexer)

    if current.type is TokenType.CR:
        raise fail(lexer, Reason.CR_WITHOUT_LF)

    if lexer.is_next_token(TokenType.GENERIC) and previous.type is not TokenType.AT:
        raise fail(lexer, Reason.ATEXT_AFTER_CFWS, lexer.peek_token())

    if current.type in (TokenType.LF, TokenType.NUL):
        raise fail(lexer, Reason.EXPECTED_CTEXT)

    if lexer.is_next_token(TokenType.AT) or previous.type is TokenType.AT:
        warnings.append(EmailWarning.DEPRECATED_CFWS_NEAR_AT)
    else:
        warnings.append(EmailWarning.CFWS_FWS)


def warn_escaping(lexer: Lexer, warnings: list[EmailWarning]) -> bool:
    """
    Check a backslash outside of a quoted string.

    Returns:
        True if a deprecated quoted pair was recorded

    Raises:
        InvalidEmail: EXPECTING_ATEXT if the backslash escapes address text
    """
    if lexer.current().type is not TokenType.BACKSLASH:
        return False

    if lexer.is_next_token(TokenType.GENERIC):
        raise fail(lexer, Reason.EXPECTING_ATEXT, lexer.peek_token())

    if not lexer.is_next_token(TokenType.SP, TokenType.HTAB, TokenType.DEL):
        return False

    warnings.append(EmailWarning.DEPRECATED_QP)
    return True
