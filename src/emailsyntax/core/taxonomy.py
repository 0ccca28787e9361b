"""
Warning and failure vocabulary for email address parsing.

Warnings are soft: the address is accepted but uses a deprecated or
unusual form. Reasons identify hard failures: the address is rejected.
Both are plain labels and carry no payload.
"""

from __future__ import annotations

from enum import Enum


class EmailWarning(str, Enum):
    """Soft diagnostics collected while walking an address."""

    # Comments and folding whitespace
    CFWS_COMMENT = "cfws_comment"
    CFWS_FWS = "cfws_fws"

    # Deprecated (obsolete RFC 5322 syntax)
    DEPRECATED_QP = "deprecated_quoted_pair"
    DEPRECATED_CFWS_NEAR_AT = "deprecated_cfws_near_at"
    DEPRECATED_COMMENT = "deprecated_comment"

    # RFC 5321 (valid for SMTP but unusual)
    RFC5321_QUOTED_STRING = "rfc5321_quoted_string"
    RFC5321_ADDRESS_LITERAL = "rfc5321_address_literal"
    RFC5321_IPV6_DEPRECATED = "rfc5321_ipv6_deprecated"

    # RFC 5322 (valid in a message header, not for SMTP)
    RFC5322_DOMAIN_LITERAL = "rfc5322_domain_literal"
    RFC5322_DOMAIN_LITERAL_OBS_DTEXT = "rfc5322_domain_literal_obs_dtext"
    RFC5322_IPV6_COLON_START = "rfc5322_ipv6_colon_start"
    RFC5322_IPV6_COLON_END = "rfc5322_ipv6_colon_end"
    RFC5322_IPV6_BAD_CHAR = "rfc5322_ipv6_bad_char"
    RFC5322_IPV6_GROUP_COUNT = "rfc5322_ipv6_group_count"
    RFC5322_IPV6_MAX_GROUPS = "rfc5322_ipv6_max_groups"
    RFC5322_IPV6_DOUBLE_DOUBLE_COLON = "rfc5322_ipv6_double_double_colon"
    RFC5322_LOCAL_TOO_LONG = "rfc5322_local_too_long"
    RFC5322_DOMAIN_TOO_LONG = "rfc5322_domain_too_long"
    RFC5322_LABEL_TOO_LONG = "rfc5322_label_too_long"

    @property
    def category(self) -> str:
        """Group label: ``cfws``, ``deprecated``, ``rfc5321`` or ``rfc5322``."""
        return self.value.split("_", 1)[0]


class Reason(str, Enum):
    """Hard failure kinds. Exactly one is reported for a rejected address."""

    # Raised by the shared grammar rules
    UNCLOSED_DOUBLE_QUOTE = "unclosed_double_quote"
    UNCLOSED_COMMENT = "unclosed_comment"
    ATEXT_AFTER_COMMENT = "atext_after_comment"
    ATEXT_AFTER_CFWS = "atext_after_cfws"
    CR_WITHOUT_LF = "cr_without_lf"
    CONSECUTIVE_CRLF = "consecutive_crlf"
    CRLF_AT_END = "crlf_at_end"
    EXPECTED_CTEXT = "expected_ctext"
    CONSECUTIVE_DOTS = "consecutive_dots"

    # Raised by the local-part and domain-part walkers
    NO_LOCAL_PART = "no_local_part"
    NO_DOMAIN_PART = "no_domain_part"
    DOT_AT_START = "dot_at_start"
    DOT_AT_END = "dot_at_end"
    EXPECTING_ATEXT = "expecting_atext"
    EXPECTING_AT = "expecting_at"
    UNOPENED_COMMENT = "unopened_comment"
    CONSECUTIVE_ATS = "consecutive_ats"
    COMMA_IN_DOMAIN = "comma_in_domain"
    DOMAIN_HYPHENATED = "domain_hyphenated"
    DOMAIN_CHAR_ERROR = "domain_char_error"
    UNCLOSED_DOMAIN_LITERAL = "unclosed_domain_literal"
    EXPECTING_DTEXT = "expecting_dtext"

    def describe(self) -> str:
        """Human-readable message for this failure."""
        return _REASON_MESSAGES[self]


_REASON_MESSAGES: dict[Reason, str] = {
    Reason.UNCLOSED_DOUBLE_QUOTE: "Quoted string is never closed",
    Reason.UNCLOSED_COMMENT: "Comment is never closed",
    Reason.ATEXT_AFTER_COMMENT: "Address text directly follows a comment",
    Reason.ATEXT_AFTER_CFWS: "Address text directly follows folding whitespace",
    Reason.CR_WITHOUT_LF: "Carriage return without line feed",
    Reason.CONSECUTIVE_CRLF: "Folding whitespace contains two consecutive CRLF",
    Reason.CRLF_AT_END: "Folding whitespace ends with CRLF",
    Reason.EXPECTED_CTEXT: "Expected comment text or whitespace",
    Reason.CONSECUTIVE_DOTS: "Consecutive dots",
    Reason.NO_LOCAL_PART: "Address has no local part",
    Reason.NO_DOMAIN_PART: "Address has no domain part",
    Reason.DOT_AT_START: "Part starts with a dot",
    Reason.DOT_AT_END: "Part ends with a dot",
    Reason.EXPECTING_ATEXT: "Expected address text",
    Reason.EXPECTING_AT: "Expected '@' after quoted string",
    Reason.UNOPENED_COMMENT: "Comment closed but never opened",
    Reason.CONSECUTIVE_ATS: "Consecutive '@' characters",
    Reason.COMMA_IN_DOMAIN: "Comma in domain",
    Reason.DOMAIN_HYPHENATED: "Domain label starts or ends with a hyphen",
    Reason.DOMAIN_CHAR_ERROR: "Character not allowed in domain",
    Reason.UNCLOSED_DOMAIN_LITERAL: "Domain literal is never closed",
    Reason.EXPECTING_DTEXT: "Expected domain literal text",
}
