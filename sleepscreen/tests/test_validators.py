from __future__ import annotations

import pytest

from sleepscreen.core.answers import ContactInfo
from sleepscreen.core.errors import FieldValidationError
from sleepscreen.core.validators import (
    EMAIL_PATTERN,
    ValidationErrorCode,
    require_valid,
    validate_contact,
    validate_email,
    validate_field,
    validate_name,
    validate_phone,
)

EMAIL_SAMPLES = [
    "jane@example.com",
    "JANE.DOE+sleep@Example.Co.UK",
    "a_b%c@d-e.org",
    "jane@example",
    "jane.example.com",
    "jane@ex ample.com",
    "jane@example.c",
    "@example.com",
    "jane@@example.com",
    "jane@example.com\n",
    " jane@example.com",
    "",
    "   ",
]


@pytest.mark.parametrize(
    "value, code",
    [
        ("Jane Doe", None),
        ("Al", None),
        ("", ValidationErrorCode.EMPTY_FIELD),
        ("   ", ValidationErrorCode.EMPTY_FIELD),
        ("J", ValidationErrorCode.TOO_SHORT),
        ("Jane-Doe", ValidationErrorCode.INVALID_CHARACTERS),
        ("Jane2", ValidationErrorCode.INVALID_CHARACTERS),
    ],
)
def test_validate_name(value, code):
    error = validate_name(value)
    assert (error.code if error else None) == code


@pytest.mark.parametrize(
    "value, code",
    [
        ("jane@example.com", None),
        ("JANE@EXAMPLE.COM", None),
        ("", ValidationErrorCode.EMPTY_FIELD),
        ("jane@example", ValidationErrorCode.INVALID_FORMAT),
        ("jane.example.com", ValidationErrorCode.INVALID_FORMAT),
    ],
)
def test_validate_email(value, code):
    error = validate_email(value)
    assert (error.code if error else None) == code


@pytest.mark.parametrize(
    "value, code",
    [
        ("5551234567", None),
        ("+15551234567", None),
        ("(555) 123-4567", None),
        ("555 123 4567", None),
        ("", ValidationErrorCode.EMPTY_FIELD),
        ("12345", ValidationErrorCode.TOO_SHORT),
        ("abcdefghij", ValidationErrorCode.INVALID_FORMAT),
        ("555-123-45678", ValidationErrorCode.INVALID_FORMAT),
    ],
)
def test_validate_phone(value, code):
    error = validate_phone(value)
    assert (error.code if error else None) == code


@pytest.mark.parametrize("value", EMAIL_SAMPLES)
def test_email_validator_matches_documented_regex(value):
    accepted = validate_email(value) is None
    assert accepted == (EMAIL_PATTERN.fullmatch(value) is not None)


def test_messages_follow_form_wording():
    assert validate_name("").message == "Full name is required"
    assert validate_phone("123").message == "Phone number must be at least 10 digits"
    assert validate_email("x").message == "Please enter a valid email address"


def test_validate_contact_collects_each_failing_field():
    errors = validate_contact(ContactInfo(full_name="Jane Doe", email="bad", phone=""))
    assert set(errors) == {"email", "phone"}
    assert errors["phone"].code is ValidationErrorCode.EMPTY_FIELD


def test_validate_field_rejects_unknown_field():
    with pytest.raises(KeyError):
        validate_field("address", "1 Main St")


def test_require_valid_raises_with_field_error():
    assert require_valid("email", "jane@example.com") == "jane@example.com"
    with pytest.raises(FieldValidationError) as exc_info:
        require_valid("full_name", "J")
    assert exc_info.value.error.code is ValidationErrorCode.TOO_SHORT
