"""
Lexer/Tokenizer for email addresses.

Converts raw address text into a stream of tokens and keeps a cursor over
it. The cursor supports one-token lookahead and a forward scan that
consumes tokens until a given kind is found.
"""

import unicodedata
from dataclasses import dataclass
from enum import Enum

from .errors import NoTokenError


class TokenType(Enum):
    """Token kinds recognized in an email address."""

    # Address text: any run of characters without special meaning
    GENERIC = "GENERIC"

    # Structural characters
    DOT = "."
    AT = "@"
    DQUOTE = '"'
    BACKSLASH = "\\"
    OPENPARENTHESIS = "("
    CLOSEPARENTHESIS = ")"
    OPENBRACKET = "["
    CLOSEBRACKET = "]"
    COLON = ":"
    SEMICOLON = ";"
    COMMA = ","
    LOWERTHAN = "<"
    GREATERTHAN = ">"
    HYPHEN = "-"
    SLASH = "/"
    OPENQBRACKET = "{"
    CLOSEQBRACKET = "}"

    # Whitespace
    SP = " "
    HTAB = "\t"
    CR = "\r"
    LF = "\n"
    CRLF = "\r\n"

    # Control characters
    NUL = "\x00"
    DEL = "\x7f"
    INVALID = "INVALID"

    # Special
    EOF = "EOF"
    NONE = "NONE"


# Single characters that always form their own token
SPECIAL_CHARACTERS: dict[str, TokenType] = {
    token_type.value: token_type
    for token_type in TokenType
    if len(token_type.value) == 1
}


@dataclass(frozen=True)
class Token:
    """
    A single token of an address.

    Attributes:
        type: Type of token
        value: Text the token matched
        position: 0-based offset of the token in the lexed text
    """

    type: TokenType
    value: str
    position: int

    def is_any(self, *token_types: TokenType) -> bool:
        """Check whether this token is of one of the given kinds."""
        return self.type in token_types

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.position})"


# Returned by Lexer.previous() when nothing precedes the cursor
NO_TOKEN = Token(TokenType.NONE, "", -1)


def _is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


class Lexer:
    """
    Lexer for a single address or address part.

    The text is tokenized on construction. The cursor starts before the
    first token; call :meth:`advance` once before reading :meth:`current`.
    """

    def __init__(self, text: str):
        """
        Initialize lexer.

        Args:
            text: Address text to tokenize
        """
        self.text = text
        self.pos = 0
        self.tokens: list[Token] = []
        self._cursor = -1
        self.tokenize()

    # ------------------------------------------------------------------
    # Tokenizing
    # ------------------------------------------------------------------

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def read_atom(self) -> str:
        """Read a run of characters with no special meaning."""
        chars = []
        current = self.current_char()
        while current and current not in SPECIAL_CHARACTERS and not _is_control(current):
            chars.append(current)
            self.pos += 1
            current = self.current_char()
        return "".join(chars)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire text.

        Returns:
            List of tokens ending with EOF
        """
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            start = self.pos

            if ch == "\r" and self.peek_char() == "\n":
                self.pos += 2
                self.tokens.append(Token(TokenType.CRLF, "\r\n", start))

            elif ch in SPECIAL_CHARACTERS:
                self.pos += 1
                self.tokens.append(Token(SPECIAL_CHARACTERS[ch], ch, start))

            elif _is_control(ch):
                self.pos += 1
                self.tokens.append(Token(TokenType.INVALID, ch, start))

            else:
                value = self.read_atom()
                self.tokens.append(Token(TokenType.GENERIC, value, start))

        self.tokens.append(Token(TokenType.EOF, "", len(self.text)))
        return self.tokens

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    @property
    def position(self) -> int:
        """Index of the current token (-1 before the first advance)."""
        return self._cursor

    def current(self) -> Token:
        """
        Get the token under the cursor.

        Raises:
            NoTokenError: If called before the first advance
        """
        if self._cursor < 0:
            raise NoTokenError("Lexer has not been advanced yet")
        return self.tokens[self._cursor]

    def previous(self) -> Token:
        """Get the token behind the cursor, or NO_TOKEN at the first token."""
        if self._cursor < 1:
            return NO_TOKEN
        return self.tokens[self._cursor - 1]

    def peek_token(self, offset: int = 1) -> Token:
        """Peek ahead at token without consuming it."""
        pos = self._cursor + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def advance(self) -> Token:
        """Move the cursor by one token and return the new current token."""
        if self._cursor < 0 or self.tokens[self._cursor].type is not TokenType.EOF:
            self._cursor += 1
        return self.tokens[self._cursor]

    def is_next_token(self, *token_types: TokenType) -> bool:
        """Check the token after the current one against the given kinds."""
        return self.peek_token().type in token_types

    def find(self, token_type: TokenType) -> bool:
        """
        Consume tokens until one of ``token_type`` is under the cursor.

        The scan starts with the token after the current one. On success
        the cursor rests on the found token; otherwise it rests on EOF.

        Returns:
            True if a token of the requested kind was found
        """
        while True:
            token = self.advance()
            if token.type is token_type:
                return True
            if token.type is TokenType.EOF:
                return False

    def count_between(self, start: int, token_type: TokenType) -> int:
        """Count tokens of ``token_type`` strictly between ``start`` and the cursor."""
        return sum(1 for token in self.tokens[start + 1 : self._cursor] if token.type is token_type)

    def text_between(self, start: int) -> str:
        """Raw text of the tokens strictly between ``start`` and the cursor."""
        return "".join(token.value for token in self.tokens[start + 1 : self._cursor])


def tokenize(text: str) -> list[Token]:
    """
    Convenience function to tokenize address text.

    Args:
        text: Address or address part

    Returns:
        List of tokens ending with EOF
    """
    return Lexer(text).tokens
