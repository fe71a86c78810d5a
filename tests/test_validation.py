"""Tests for input validation utilities."""

import pytest

from translation_hub.domain.exceptions import (
    InvalidEmailError,
    ValidationError,
    WeakPasswordError,
)
from translation_hub.utils.validation import (
    is_well_formed_signed_session_id,
    sanitize_string,
    validate_email,
    validate_language_code,
    validate_password_strength,
)


class TestValidateEmail:
    @pytest.mark.parametrize("email", ["alice@example.com", "first.last+tag@sub.example.org", "Bob@Example.COM"])
    def test_valid(self, email):
        assert validate_email(email) == email

    def test_surrounding_whitespace_is_trimmed(self):
        assert validate_email("  alice@example.com\t") == "alice@example.com"

    @pytest.mark.parametrize("email", ["", "   ", "plainaddress", "a@b", "a @example.com", "a@@example.com", None])
    def test_invalid(self, email):
        with pytest.raises(InvalidEmailError):
            validate_email(email)

    def test_too_long(self):
        with pytest.raises(InvalidEmailError):
            validate_email("a" * 250 + "@example.com")


class TestValidatePasswordStrength:
    def test_reports_the_failed_rule(self):
        with pytest.raises(WeakPasswordError, match="at least 8 characters"):
            validate_password_strength("Ab!")
        with pytest.raises(WeakPasswordError, match="uppercase"):
            validate_password_strength("lowercase1!")
        with pytest.raises(WeakPasswordError, match="special character"):
            validate_password_strength("NoSpecial123")

    def test_boundary_length(self):
        assert validate_password_strength("Abcdef!x") == "Abcdef!x"
        with pytest.raises(WeakPasswordError):
            validate_password_strength("Abcde!x")

    def test_byte_length_counts_multibyte_characters(self):
        # 2 + 23 * 3 bytes fits the bcrypt limit; one more euro sign does not.
        assert validate_password_strength("A!" + "€" * 23)
        with pytest.raises(WeakPasswordError):
            validate_password_strength("A!" + "€" * 24)


class TestValidateLanguageCode:
    @pytest.mark.parametrize("code", ["en", "es", "fil", "zh-CN", "en-US", "zh-Hant"])
    def test_valid(self, code):
        assert validate_language_code(code) == code

    def test_auto_only_where_allowed(self):
        assert validate_language_code("auto", allow_auto=True) == "auto"
        with pytest.raises(ValidationError):
            validate_language_code("auto")

    @pytest.mark.parametrize("code", ["", "e", "english", "en_US", "12", "en-", None])
    def test_invalid(self, code):
        with pytest.raises(ValidationError) as exc_info:
            validate_language_code(code, field="to_lang")
        assert exc_info.value.field == "to_lang"


class TestSanitizeString:
    def test_strips_whitespace_and_null_bytes(self):
        assert sanitize_string("  hel\0lo \n") == "hello"

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError):
            sanitize_string("x" * 11, max_length=10, field="text")

    def test_rejects_non_string(self):
        with pytest.raises(ValidationError):
            sanitize_string(42, field="text")


def test_signed_session_id_shape():
    assert is_well_formed_signed_session_id("0123456789abcdef" * 4)
    assert not is_well_formed_signed_session_id("0123456789ABCDEF" * 4)
    assert not is_well_formed_signed_session_id("abc")
    assert not is_well_formed_signed_session_id(None)
