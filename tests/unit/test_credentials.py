from __future__ import annotations

import pytest

from password_processor.domain.auth.credentials import (
    InvalidPasswordInputError,
    validate_plaintext_password,
)


def test_valid_password_is_returned_unchanged() -> None:
    assert validate_plaintext_password(password="  padded secret  ") == "  padded secret  "


def test_zero_string_is_a_valid_password() -> None:
    assert validate_plaintext_password(password="0") == "0"


def test_long_password_is_accepted_unchanged() -> None:
    password = "é" * 80

    assert validate_plaintext_password(password=password) == password


@pytest.mark.parametrize("password", ["", None, b"secret", 0])
def test_invalid_password_error_is_value_error(password: object) -> None:
    with pytest.raises(ValueError, match="non-empty string"):
        validate_plaintext_password(password=password)

    with pytest.raises(InvalidPasswordInputError):
        validate_plaintext_password(password=password)
