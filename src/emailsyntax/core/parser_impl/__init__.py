"""
Email address parser package.

The grammar is split into two walkers sharing the rules in ``base``:

- LocalPartWalker: ``local-part "@"`` (dot-atom or quoted string)
- DomainPartWalker: ``"@" domain`` (host name or domain literal)

Usage:
    from emailsyntax.core.parser_impl import parse_local_part, parse_domain_part

    warnings = parse_local_part('"john doe"@')
    warnings += parse_domain_part("@example.com")
"""

from ..lexer import Lexer
from ..taxonomy import EmailWarning
from .base import PartWalker
from .domain_part import DomainPartWalker
from .local_part import LocalPartWalker


def parse_local_part(text: str) -> list[EmailWarning]:
    """
    Walk a local part followed by its separating ``@``.

    Raises:
        InvalidEmail: On the first syntax violation
    """
    return LocalPartWalker().walk(Lexer(text))


def parse_domain_part(text: str) -> list[EmailWarning]:
    """
    Walk a domain part preceded by its separating ``@``.

    Raises:
        InvalidEmail: On the first syntax violation
    """
    return DomainPartWalker().walk(Lexer(text))


__all__ = [
    "DomainPartWalker",
    "LocalPartWalker",
    "PartWalker",
    "parse_domain_part",
    "parse_local_part",
]
