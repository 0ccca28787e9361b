"""
Local-part walker.

Walks ``local-part "@"``: a dot-atom or a quoted string, optionally
surrounded by comments and folding whitespace, terminated by the
separating ``@``.
"""

from ..lexer import Lexer, TokenType
from ..taxonomy import EmailWarning, Reason
from .base import (
    check_comment_end,
    check_consecutive_dots,
    check_double_quote,
    escaped,
    fail,
    is_fws,
    parse_comment,
    parse_fws,
    warn_escaping,
)

LOCAL_PART_MAX_LENGTH = 64

# Not allowed unquoted in a local part
FORBIDDEN_TYPES = frozenset(
    {
        TokenType.COMMA,
        TokenType.OPENBRACKET,
        TokenType.CLOSEBRACKET,
        TokenType.LOWERTHAN,
        TokenType.GREATERTHAN,
        TokenType.COLON,
        TokenType.SEMICOLON,
        TokenType.NUL,
        TokenType.DEL,
        TokenType.INVALID,
    }
)

# Tokens after which a quoted string may open
QUOTE_OPENERS = frozenset(
    {
        TokenType.NONE,
        TokenType.SP,
        TokenType.HTAB,
        TokenType.CRLF,
        TokenType.CLOSEPARENTHESIS,
    }
)

QUOTED_FWS_TYPES = frozenset({TokenType.HTAB, TokenType.CRLF, TokenType.CR, TokenType.LF})


class LocalPartWalker:
    """
    Grammar walker for the local part.

    The lexer must cover the local part followed by the separating ``@``.
    """

    def walk(self, lexer: Lexer) -> list[EmailWarning]:
        """
        Walk the local part.

        Returns:
            Warnings in the order they were found

        Raises:
            InvalidEmail: On the first syntax violation
        """
        warnings: list[EmailWarning] = []
        closing_quote = False
        open_comments = 0

        token = lexer.advance()
        if token.type is TokenType.AT:
            raise fail(lexer, Reason.NO_LOCAL_PART)
        if token.type is TokenType.DOT:
            raise fail(lexer, Reason.DOT_AT_START)

        while not lexer.current().is_any(TokenType.AT, TokenType.EOF):
            token = lexer.current()

            if token.type is TokenType.DQUOTE and not escaped(lexer):
                closing_quote = self._parse_quoted_string(lexer, warnings, closing_quote)
                continue

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

            current = lexer.current()
            if current.type is TokenType.DOT and lexer.is_next_token(TokenType.AT):
                raise fail(lexer, Reason.DOT_AT_END)

            # outside a quoted string a backslash may only escape whitespace or DEL
            quoted_pair = warn_escaping(lexer, warnings)
            if current.type is TokenType.BACKSLASH and not quoted_pair:
                raise fail(lexer, Reason.EXPECTING_ATEXT)

            if current.type in FORBIDDEN_TYPES and not closing_quote:
                raise fail(lexer, Reason.EXPECTING_ATEXT)

            if is_fws(lexer):
                parse_fws(lexer, warnings)

            lexer.advance()

        if open_comments:
            raise fail(lexer, Reason.UNCLOSED_COMMENT)
        if lexer.current().type is TokenType.EOF:
            raise fail(lexer, Reason.NO_DOMAIN_PART)
        if not lexer.is_next_token(TokenType.EOF):
            # a second "@" outside of a quoted string
            raise fail(lexer, Reason.EXPECTING_ATEXT)

        if len(lexer.text) - 1 > LOCAL_PART_MAX_LENGTH:
            warnings.append(EmailWarning.RFC5322_LOCAL_TOO_LONG)

        return warnings

    def _parse_quoted_string(
        self, lexer: Lexer, warnings: list[EmailWarning], closing_quote: bool
    ) -> bool:
        """Consume a quoted string; the cursor ends on the ``@`` after it."""
        if lexer.previous().type not in QUOTE_OPENERS:
            raise fail(lexer, Reason.EXPECTING_ATEXT)

        start = lexer.position
        closing_quote = check_double_quote(lexer, warnings, closing_quote)
        while self._is_escaped_quote(lexer):
            if not lexer.find(TokenType.DQUOTE):
                raise fail(lexer, Reason.UNCLOSED_DOUBLE_QUOTE, lexer.tokens[start])

        self._check_quoted_content(lexer, start, warnings)

        if not lexer.is_next_token(TokenType.AT):
            raise fail(lexer, Reason.EXPECTING_AT, lexer.peek_token())
        lexer.advance()
        return closing_quote

    def _is_escaped_quote(self, lexer: Lexer) -> bool:
        """True if the quote under the cursor is preceded by an odd run of backslashes."""
        if not escaped(lexer):
            return False
        run = 0
        index = lexer.position - 1
        while index >= 0 and lexer.tokens[index].type is TokenType.BACKSLASH:
            run += 1
            index -= 1
        return run % 2 == 1

    def _check_quoted_content(
        self, lexer: Lexer, start: int, warnings: list[EmailWarning]
    ) -> None:
        """Check the tokens between the opening quote and the cursor."""
        body = lexer.tokens[start + 1 : lexer.position]
        fws_seen = False

        for index, token in enumerate(body):
            if token.type in QUOTED_FWS_TYPES and not fws_seen:
                warnings.append(EmailWarning.CFWS_FWS)
                fws_seen = True

            if index and body[index - 1].type is TokenType.BACKSLASH:
                continue

            if token.type is TokenType.NUL:
                raise fail(lexer, Reason.EXPECTING_ATEXT, token)
            if token.type is TokenType.CR:
                raise fail(lexer, Reason.CR_WITHOUT_LF, token)
            if token.type is TokenType.LF:
                raise fail(lexer, Reason.EXPECTED_CTEXT, token)
            if token.type is TokenType.CRLF:
                following = body[index + 1] if index + 1 < len(body) else None
                if following is None or following.type not in (TokenType.SP, TokenType.HTAB):
                    raise fail(lexer, Reason.CRLF_AT_END, token)
