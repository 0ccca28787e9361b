"""
Domain literal parsing (``[127.0.0.1]``, ``[IPv6:2001:db8::1]``).
"""

import re

from ..lexer import Lexer, TokenType
from ..taxonomy import EmailWarning, Reason
from .base import fail

IPV6_TAG = "IPv6:"
IPV6_MAX_GROUPS = 8

IPV4_PATTERN = re.compile(
    r"\b(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$"
)
HEX_GROUP_PATTERN = re.compile(r"^[0-9A-Fa-f]{0,4}$")

OBSOLETE_DTEXT_TYPES = frozenset(
    {TokenType.BACKSLASH, TokenType.DEL, TokenType.INVALID, TokenType.LF}
)
LITERAL_FWS_TYPES = frozenset({TokenType.SP, TokenType.HTAB, TokenType.CRLF})


def parse_domain_literal(lexer: Lexer, warnings: list[EmailWarning]) -> str:
    """
    Parse the domain literal opened by the ``[`` under the cursor.

    The cursor lands on the closing ``]``.

    Returns:
        The literal text between the brackets

    Raises:
        InvalidEmail: UNCLOSED_DOMAIN_LITERAL, EXPECTING_DTEXT or CR_WITHOUT_LF
    """
    start = lexer.position
    if not lexer.find(TokenType.CLOSEBRACKET):
        raise fail(lexer, Reason.UNCLOSED_DOMAIN_LITERAL, lexer.tokens[start])

    for token in lexer.tokens[start + 1 : lexer.position]:
        if token.type in (TokenType.NUL, TokenType.OPENBRACKET):
            raise fail(lexer, Reason.EXPECTING_DTEXT, token)
        if token.type is TokenType.CR:
            raise fail(lexer, Reason.CR_WITHOUT_LF, token)
        if token.type in OBSOLETE_DTEXT_TYPES:
            warnings.append(EmailWarning.RFC5322_DOMAIN_LITERAL_OBS_DTEXT)
        elif token.type in LITERAL_FWS_TYPES:
            warnings.append(EmailWarning.CFWS_FWS)

    literal = lexer.text_between(start)
    check_address_literal(literal, warnings)
    return literal


def check_address_literal(literal: str, warnings: list[EmailWarning]) -> None:
    """Classify a literal as IPv4, IPv6 or general domain literal."""
    match = IPV4_PATTERN.search(literal)
    if match:
        index = literal.rfind(match.group(0))
        if index == 0:
            warnings.append(EmailWarning.RFC5321_ADDRESS_LITERAL)
            return
        # Trailing IPv4 counts as two IPv6 groups
        literal = literal[:index] + "0:0"

    if not literal.startswith(IPV6_TAG):
        warnings.append(EmailWarning.RFC5322_DOMAIN_LITERAL)
        return

    warnings.append(EmailWarning.RFC5321_ADDRESS_LITERAL)
    check_ipv6(literal[len(IPV6_TAG) :], warnings)


def check_ipv6(address: str, warnings: list[EmailWarning]) -> None:
    """Record the ways an IPv6 address literal deviates from RFC 5321."""
    max_groups = IPV6_MAX_GROUPS

    if address.startswith(":") and not address.startswith("::"):
        warnings.append(EmailWarning.RFC5322_IPV6_COLON_START)
    if address.endswith(":") and not address.endswith("::"):
        warnings.append(EmailWarning.RFC5322_IPV6_COLON_END)

    groups = address.split(":")
    if any(not HEX_GROUP_PATTERN.match(group) for group in groups):
        warnings.append(EmailWarning.RFC5322_IPV6_BAD_CHAR)

    colons = address.find("::")
    if colons == -1:
        if len(groups) != max_groups:
            warnings.append(EmailWarning.RFC5322_IPV6_GROUP_COUNT)
        return

    if colons != address.rfind("::"):
        warnings.append(EmailWarning.RFC5322_IPV6_DOUBLE_DOUBLE_COLON)
        return

    if colons == 0 or colons == len(address) - 2:
        max_groups += 1

    if len(groups) > max_groups:
        warnings.append(EmailWarning.RFC5322_IPV6_MAX_GROUPS)
    elif len(groups) == max_groups:
        # "::" standing in for a single group
        warnings.append(EmailWarning.RFC5321_IPV6_DEPRECATED)
