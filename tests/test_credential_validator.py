"""Tests for password validation."""

import pytest

from clean_auth.domain.errors import InvalidPasswordError, LoginErrorKind
from clean_auth.domain.services.credential_validator import (
    MIN_PASSWORD_LENGTH,
    PasswordLengthValidator,
    validate_password,
)


@pytest.mark.parametrize("password", ["", "a", "abcd", "12345"])
def test_rejects_short_passwords(password):
    with pytest.raises(InvalidPasswordError) as exc_info:
        validate_password(password)
    assert exc_info.value.kind == LoginErrorKind.INVALID_PASSWORD
    assert exc_info.value.min_length == MIN_PASSWORD_LENGTH


@pytest.mark.parametrize("password", ["123456", "longenough", "x" * 200])
def test_accepts_long_enough_passwords(password):
    assert validate_password(password) is None


def test_boundary_lengths():
    validator = PasswordLengthValidator()
    validator.validate("a" * 6)
    with pytest.raises(InvalidPasswordError):
        validator.validate("a" * 5)


def test_only_length_is_checked():
    # No character-class rules: whitespace and digits-only pass
    validate_password("      ")
    validate_password("000000")


def test_message_mentions_minimum():
    with pytest.raises(InvalidPasswordError, match="at least 6 characters"):
        validate_password("short")


def test_custom_min_length():
    validator = PasswordLengthValidator(min_length=10)
    validator.validate("0123456789")
    with pytest.raises(InvalidPasswordError, match="at least 10"):
        validator.validate("012345678")


def test_negative_min_length_rejected():
    with pytest.raises(ValueError):
        PasswordLengthValidator(min_length=-1)
