"""Tests for the EmailValidator façade."""

import pytest

from emailsyntax import (
    EmailValidator,
    EmailWarning,
    Reason,
    ValidatorSettings,
    is_valid,
    validate,
)

VALID_ADDRESSES = [
    "example@example.com",
    "example@example.co.uk",
    "example_underscore@example.fr",
    "example@localhost",
    "exam'ple@example.com",
    "exam\\ ple@example.com",
    "example((example))@fakedfake.co.uk",
    "example@faked(fake).co.uk",
    "example+@example.com",
    "инфо@письмо.рф",
    '"username"@example.com',
    '"user,name"@example.com',
    '"user name"@example.com',
    '"user@name"@example.com',
    '"\\a"@iana.org',
    '"test\\ test"@iana.org',
    '""@iana.org',
    '"\\""@iana.org',
]

INVALID_ADDRESSES = [
    ("nolocalpart.com", Reason.NO_DOMAIN_PART),
    ("test@example.com test", Reason.ATEXT_AFTER_CFWS),
    ("user  name@example.com", Reason.ATEXT_AFTER_CFWS),
    ("user   name@example.com", Reason.ATEXT_AFTER_CFWS),
    ("example.@example.co.uk", Reason.DOT_AT_END),
    ("example@example@example.co.uk", Reason.EXPECTING_ATEXT),
    ("(test_exampel@example.fr}", Reason.UNCLOSED_COMMENT),
    ("example(example)example@example.co.uk", Reason.ATEXT_AFTER_COMMENT),
    (".example@localhost", Reason.DOT_AT_START),
    ("ex\\ample@localhost", Reason.EXPECTING_ATEXT),
    ("a\\@example.com", Reason.EXPECTING_ATEXT),
    ("a\\.b@example.com", Reason.EXPECTING_ATEXT),
    ('a\\"@example.com', Reason.EXPECTING_ATEXT),
    ("example@local\\host", Reason.EXPECTING_ATEXT),
    ("example@localhost.", Reason.DOT_AT_END),
    ("user name@example.com", Reason.ATEXT_AFTER_CFWS),
    ("username@ example . com", Reason.ATEXT_AFTER_CFWS),
    ("example@(fake}.com", Reason.UNCLOSED_COMMENT),
    ("example@(fake.com", Reason.UNCLOSED_COMMENT),
    ("username@example,com", Reason.COMMA_IN_DOMAIN),
    ("usern,ame@example.com", Reason.EXPECTING_ATEXT),
    ("user[na]me@example.com", Reason.EXPECTING_ATEXT),
    ('"""@iana.org', Reason.EXPECTING_AT),
    ('"\\"@iana.org', Reason.UNCLOSED_DOUBLE_QUOTE),
    ('"test"test@iana.org', Reason.EXPECTING_AT),
    ('"test""test"@iana.org', Reason.EXPECTING_AT),
    ('"test"."test"@iana.org', Reason.EXPECTING_AT),
    ('"test".test@iana.org', Reason.EXPECTING_AT),
    ('"test"\x00@iana.org', Reason.EXPECTING_AT),
    ('"test\\"@iana.org', Reason.UNCLOSED_DOUBLE_QUOTE),
    ("\r\ntest@iana.org", Reason.CRLF_AT_END),
    ("\r\n test@iana.org", Reason.ATEXT_AFTER_CFWS),
    ("\r\n \r\ntest@iana.org", Reason.CRLF_AT_END),
    ("\r\n \r\n test@iana.org", Reason.ATEXT_AFTER_CFWS),
    ("test@iana.org \r\n", Reason.CRLF_AT_END),
    ("test@iana.org \r\n ", Reason.CRLF_AT_END),
    ("test@iana.org \r\n \r\n", Reason.CRLF_AT_END),
    ("test@iana.org \r\n\r\n", Reason.CONSECUTIVE_CRLF),
    ("test@iana.org  \r\n\r\n ", Reason.CONSECUTIVE_CRLF),
    ("test@iana/icann.org", Reason.DOMAIN_CHAR_ERROR),
    ("test@foo;bar.com", Reason.EXPECTING_ATEXT),
    ("\x01a@test.com", Reason.EXPECTING_ATEXT),
    ('"abc@example.com', Reason.UNCLOSED_DOUBLE_QUOTE),
    ("a..b@example.com", Reason.CONSECUTIVE_DOTS),
    ("@example.com", Reason.NO_LOCAL_PART),
    ("example@", Reason.NO_DOMAIN_PART),
]


class TestValidAddresses:
    @pytest.mark.parametrize("address", VALID_ADDRESSES)
    def test_valid(self, validator: EmailValidator, address: str):
        result = validator.validate(address)
        assert result.valid, result.detail
        assert result.reason is None

    def test_plain_address_has_no_warnings(self, validator: EmailValidator):
        result = validator.validate("example@example.com")
        assert result.warnings == []
        assert not result.has_warnings
        assert not validator.has_warnings()

    def test_address_literal_has_warnings(self, validator: EmailValidator):
        result = validator.validate("test@[127.0.0.1]")
        assert result.valid
        assert result.warnings == [EmailWarning.RFC5321_ADDRESS_LITERAL]
        assert validator.has_warnings()

    def test_warnings_from_both_parts_are_merged_in_order(self, validator: EmailValidator):
        result = validator.validate('"john doe"@[127.0.0.1]')
        assert result.warnings == [
            EmailWarning.RFC5321_QUOTED_STRING,
            EmailWarning.RFC5321_ADDRESS_LITERAL,
        ]

    def test_parts_are_split_at_last_at(self, validator: EmailValidator):
        result = validator.validate('"user@name"@example.com')
        assert result.local_part == '"user@name"'
        assert result.domain_part == "example.com"


class TestInvalidAddresses:
    @pytest.mark.parametrize("address,reason", INVALID_ADDRESSES)
    def test_invalid(self, validator: EmailValidator, address: str, reason: Reason):
        result = validator.validate(address)
        assert not result.valid
        assert result.reason is reason

    def test_failure_discards_warnings(self, validator: EmailValidator):
        # the quoted string warns before the domain fails
        result = validator.validate('"a"@example..com')
        assert result.reason is Reason.CONSECUTIVE_DOTS
        assert result.warnings == []

    def test_failure_detail_locates_the_error(self, validator: EmailValidator):
        result = validator.validate("a..b@example.com")
        assert result.detail == "Consecutive dots\n  a..b@\n    ^"

    def test_missing_at_has_no_parts(self, validator: EmailValidator):
        result = validator.validate("nolocalpart.com")
        assert result.local_part is None
        assert result.domain_part is None


class TestPolicy:
    def test_strict_rejects_warnings(self):
        result = validate("test@[127.0.0.1]", strict=True)
        assert not result.valid
        assert result.reason is None
        assert result.rejected == [EmailWarning.RFC5321_ADDRESS_LITERAL]
        assert result.warnings == [EmailWarning.RFC5321_ADDRESS_LITERAL]
        assert result.detail == "Rejected warnings: rfc5321_address_literal"

    def test_strict_accepts_clean_address(self):
        assert is_valid("example@example.com", strict=True)

    def test_reject_list(self):
        settings = ValidatorSettings(reject=frozenset({EmailWarning.CFWS_COMMENT}))
        validator = EmailValidator(settings)
        result = validator.validate("example@faked(fake).co.uk")
        assert not result.valid
        assert result.rejected == [EmailWarning.CFWS_COMMENT]
        assert validator.is_valid("test@[127.0.0.1]")

    def test_strict_keyword_overrides_settings(self):
        validator = EmailValidator(ValidatorSettings(strict=True), strict=False)
        assert validator.is_valid("test@[127.0.0.1]")

    def test_rejected_warnings_are_deduplicated(self):
        settings = ValidatorSettings(strict=True)
        warnings = [EmailWarning.CFWS_FWS, EmailWarning.CFWS_COMMENT, EmailWarning.CFWS_FWS]
        assert settings.rejected_warnings(warnings) == [
            EmailWarning.CFWS_FWS,
            EmailWarning.CFWS_COMMENT,
        ]


class TestAccessors:
    def test_fresh_validator(self, validator: EmailValidator):
        assert validator.warnings == []
        assert validator.error is None
        assert not validator.has_warnings()

    def test_accessors_follow_last_call(self, validator: EmailValidator):
        validator.validate("a..b@example.com")
        assert validator.error is Reason.CONSECUTIVE_DOTS
        assert validator.warnings == []

        validator.validate("test@[127.0.0.1]")
        assert validator.error is None
        assert validator.warnings == [EmailWarning.RFC5321_ADDRESS_LITERAL]

    def test_results_are_independent(self, validator: EmailValidator):
        first = validator.validate("test@[127.0.0.1]")
        second = validator.validate("example@example.com")
        assert first.warnings == [EmailWarning.RFC5321_ADDRESS_LITERAL]
        assert second.warnings == []


class TestTaxonomy:
    def test_warning_categories(self):
        assert EmailWarning.CFWS_COMMENT.category == "cfws"
        assert EmailWarning.RFC5321_ADDRESS_LITERAL.category == "rfc5321"
        assert EmailWarning.DEPRECATED_QP.category == "deprecated"

    def test_every_reason_has_a_message(self):
        for reason in Reason:
            assert reason.describe()
