"""Tests for the local-part walker."""

import pytest

from emailsyntax.core.errors import InvalidEmail
from emailsyntax.core.parser_impl import LocalPartWalker, PartWalker, parse_local_part
from emailsyntax.core.taxonomy import EmailWarning, Reason


def test_walker_satisfies_protocol():
    assert isinstance(LocalPartWalker(), PartWalker)


class TestValidLocalParts:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("example@", []),
            ("exam'ple@", []),
            ("first.last@", []),
            ('"john doe"@', [EmailWarning.RFC5321_QUOTED_STRING]),
            ('""@', [EmailWarning.RFC5321_QUOTED_STRING]),
            ('"a\\\\"@', [EmailWarning.RFC5321_QUOTED_STRING]),
            ("exam\\ ple@", [EmailWarning.DEPRECATED_QP]),
            ("test @", [EmailWarning.DEPRECATED_CFWS_NEAR_AT]),
        ],
    )
    def test_warnings(self, text: str, expected: list[EmailWarning]):
        assert parse_local_part(text) == expected

    def test_comment_before_at(self):
        assert parse_local_part("a(comment)@") == [
            EmailWarning.CFWS_COMMENT,
            EmailWarning.DEPRECATED_CFWS_NEAR_AT,
        ]

    def test_nested_comment(self):
        assert parse_local_part("example((example))@") == [
            EmailWarning.CFWS_COMMENT,
            EmailWarning.DEPRECATED_CFWS_NEAR_AT,
        ]

    def test_folding_whitespace_in_quoted_string(self):
        assert parse_local_part('"a\tb"@') == [
            EmailWarning.RFC5321_QUOTED_STRING,
            EmailWarning.CFWS_FWS,
        ]

    def test_too_long(self):
        assert parse_local_part("a" * 64 + "@") == []
        assert parse_local_part("a" * 65 + "@") == [EmailWarning.RFC5322_LOCAL_TOO_LONG]


class TestInvalidLocalParts:
    @pytest.mark.parametrize(
        "text,reason",
        [
            ("@", Reason.NO_LOCAL_PART),
            (".example@", Reason.DOT_AT_START),
            ("example.@", Reason.DOT_AT_END),
            ("a..b@", Reason.CONSECUTIVE_DOTS),
            ('a"b"@', Reason.EXPECTING_ATEXT),
            ('"a"b@', Reason.EXPECTING_AT),
            ('"a"."b"@', Reason.EXPECTING_AT),
            ('"a@', Reason.UNCLOSED_DOUBLE_QUOTE),
            ('"a\\"@', Reason.UNCLOSED_DOUBLE_QUOTE),
            ('"a\x00"@', Reason.EXPECTING_ATEXT),
            ('"a\rb"@', Reason.CR_WITHOUT_LF),
            ('"a\nb"@', Reason.EXPECTED_CTEXT),
            ('"a\r\n"@', Reason.CRLF_AT_END),
            ("a)@", Reason.UNOPENED_COMMENT),
            ("((a)@", Reason.UNCLOSED_COMMENT),
            ("(a@", Reason.UNCLOSED_COMMENT),
            ("a(b)c@", Reason.ATEXT_AFTER_COMMENT),
            ("ex\\ample@", Reason.EXPECTING_ATEXT),
            ("a\\@", Reason.EXPECTING_ATEXT),
            ("a\\.b@", Reason.EXPECTING_ATEXT),
            ('a\\"@', Reason.EXPECTING_ATEXT),
            ("a\\\\b@", Reason.EXPECTING_ATEXT),
            ("user,name@", Reason.EXPECTING_ATEXT),
            ("user[na]me@", Reason.EXPECTING_ATEXT),
            ("\x01a@", Reason.EXPECTING_ATEXT),
            ("a@b@", Reason.EXPECTING_ATEXT),
            ("user name@", Reason.ATEXT_AFTER_CFWS),
            ("\r\ntest@", Reason.CRLF_AT_END),
            ("example", Reason.NO_DOMAIN_PART),
        ],
    )
    def test_reason(self, text: str, reason: Reason):
        with pytest.raises(InvalidEmail) as exc_info:
            parse_local_part(text)
        assert exc_info.value.reason is reason

    def test_failure_points_at_offending_token(self):
        with pytest.raises(InvalidEmail) as exc_info:
            parse_local_part("a..b@")
        assert exc_info.value.context is not None
        assert exc_info.value.context.offset == 2
        assert str(exc_info.value) == "Consecutive dots\n  a..b@\n    ^"
