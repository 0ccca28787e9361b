"""
Domain-part walker.

Walks ``"@" domain``: a dot-atom host name or a bracketed domain literal,
optionally surrounded by comments and folding whitespace.
"""

from ..lexer import Lexer, TokenType
from ..taxonomy import EmailWarning, Reason
from .base import (
    check_comment_end,
    check_consecutive_dots,
    fail,
    is_fws,
    parse_comment,
    parse_fws,
)
from .literal import parse_domain_literal

DOMAIN_MAX_LENGTH = 255
LABEL_MAX_LENGTH = 63

# Not allowed anywhere in a domain outside of a literal
FORBIDDEN_TYPES = frozenset(
    {
        TokenType.DQUOTE,
        TokenType.SEMICOLON,
        TokenType.LOWERTHAN,
        TokenType.GREATERTHAN,
        TokenType.BACKSLASH,
        TokenType.COLON,
        TokenType.CLOSEBRACKET,
        TokenType.OPENQBRACKET,
        TokenType.CLOSEQBRACKET,
        TokenType.NUL,
        TokenType.DEL,
        TokenType.INVALID,
    }
)

# Tokens that may follow a domain literal
AFTER_LITERAL_TYPES = frozenset(
    {
        TokenType.EOF,
        TokenType.SP,
        TokenType.HTAB,
        TokenType.CRLF,
        TokenType.OPENPARENTHESIS,
    }
)

LABEL_TYPES = frozenset({TokenType.GENERIC, TokenType.HYPHEN})


class DomainPartWalker:
    """
    Grammar walker for the domain part.

    The lexer must cover the separating ``@`` followed by the domain.
    """

    def walk(self, lexer: Lexer) -> list[EmailWarning]:
        """
        Walk the domain part.

        Returns:
            Warnings in the order they were found

        Raises:
            InvalidEmail: On the first syntax violation
        """
        warnings: list[EmailWarning] = []
        open_comments = 0
        label_length = 0

        lexer.advance()  # the separating "@"
        token = lexer.advance()
        if token.type is TokenType.EOF:
            raise fail(lexer, Reason.NO_DOMAIN_PART)
        if token.type is TokenType.DOT:
            raise fail(lexer, Reason.DOT_AT_START)
        if token.type is TokenType.HYPHEN:
            raise fail(lexer, Reason.DOMAIN_HYPHENATED)
        if token.type is TokenType.OPENPARENTHESIS:
            warnings.append(EmailWarning.DEPRECATED_COMMENT)

        while lexer.current().type is not TokenType.EOF:
            token = lexer.current()

            if token.type is TokenType.SLASH:
                raise fail(lexer, Reason.DOMAIN_CHAR_ERROR)

            if token.type is TokenType.OPENPARENTHESIS:
                start = lexer.position
                parse_comment(lexer, warnings)
                open_comments += lexer.count_between(start, TokenType.OPENPARENTHESIS)
            elif token.type is TokenType.CLOSEPARENTHESIS:
                if open_comments == 0:
                    raise fail(lexer, Reason.UNOPENED_COMMENT)
                open_comments -= 1
                check_comment_end(lexer, warnings)

            check_consecutive_dots(lexer)
            self._check_domain_exceptions(lexer)

            if token.type is TokenType.OPENBRACKET:
                parse_domain_literal(lexer, warnings)
                if not lexer.is_next_token(*AFTER_LITERAL_TYPES):
                    raise fail(lexer, Reason.EXPECTING_ATEXT, lexer.peek_token())

            current = lexer.current()
            if current.type in LABEL_TYPES:
                label_length += len(current.value)
            elif current.type is TokenType.DOT:
                self._check_label_length(label_length, warnings)
                label_length = 0

            if is_fws(lexer):
                self._check_fold_continuation(lexer)
                parse_fws(lexer, warnings)

            lexer.advance()

        self._check_label_length(label_length, warnings)

        if open_comments:
            raise fail(lexer, Reason.UNCLOSED_COMMENT)

        previous = lexer.previous()
        if previous.type is TokenType.DOT:
            raise fail(lexer, Reason.DOT_AT_END, previous)
        if previous.type is TokenType.HYPHEN:
            raise fail(lexer, Reason.DOMAIN_HYPHENATED, previous)

        if len(lexer.text) - 1 > DOMAIN_MAX_LENGTH:
            warnings.append(EmailWarning.RFC5322_DOMAIN_TOO_LONG)

        return warnings

    def _check_domain_exceptions(self, lexer: Lexer) -> None:
        """Reject tokens that can never appear in a host name."""
        current = lexer.current()
        previous = lexer.previous()

        if current.type in FORBIDDEN_TYPES:
            raise fail(lexer, Reason.EXPECTING_ATEXT)
        if current.type is TokenType.COMMA:
            raise fail(lexer, Reason.COMMA_IN_DOMAIN)
        if current.type is TokenType.AT:
            raise fail(lexer, Reason.CONSECUTIVE_ATS)
        if current.type is TokenType.OPENBRACKET and previous.type is not TokenType.AT:
            raise fail(lexer, Reason.EXPECTING_ATEXT)
        if current.type is TokenType.HYPHEN and lexer.is_next_token(TokenType.DOT):
            raise fail(lexer, Reason.DOMAIN_HYPHENATED)
        if current.type is TokenType.HYPHEN and previous.type is TokenType.DOT:
            raise fail(lexer, Reason.DOMAIN_HYPHENATED)

    def _check_label_length(self, length: int, warnings: list[EmailWarning]) -> None:
        if length > LABEL_MAX_LENGTH:
            warnings.append(EmailWarning.RFC5322_LABEL_TOO_LONG)

    def _check_fold_continuation(self, lexer: Lexer) -> None:
        """A fold must carry text: reject CRLF followed only by whitespace up to the end."""
        if lexer.current().type not in (TokenType.SP, TokenType.HTAB):
            return
        if lexer.previous().type is not TokenType.CRLF:
            return
        rest = lexer.tokens[lexer.position + 1 : -1]
        if all(token.type in (TokenType.SP, TokenType.HTAB) for token in rest):
            raise fail(lexer, Reason.CRLF_AT_END, lexer.previous())
