"""Core emailsyntax functionality: lexer, grammar walkers, taxonomy, errors, result model."""

from .errors import (
    ConfigError,
    EmailSyntaxError,
    ErrorContext,
    InvalidEmail,
    NoTokenError,
)
from .lexer import Lexer, Token, TokenType, tokenize
from .parser_impl import (
    DomainPartWalker,
    LocalPartWalker,
    PartWalker,
    parse_domain_part,
    parse_local_part,
)
from .result import ValidationResult
from .taxonomy import EmailWarning, Reason

__all__ = [
    "ConfigError",
    "DomainPartWalker",
    "EmailSyntaxError",
    "EmailWarning",
    "ErrorContext",
    "InvalidEmail",
    "Lexer",
    "LocalPartWalker",
    "NoTokenError",
    "PartWalker",
    "Reason",
    "Token",
    "TokenType",
    "ValidationResult",
    "parse_domain_part",
    "parse_local_part",
    "tokenize",
]
