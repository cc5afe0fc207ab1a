"""Syntactic checks for the contact fields."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from .answers import ContactInfo
from .errors import FieldValidationError

__all__ = [
    "EMAIL_PATTERN",
    "FieldError",
    "NAME_PATTERN",
    "PHONE_PATTERN",
    "ValidationErrorCode",
    "require_valid",
    "validate_contact",
    "validate_email",
    "validate_field",
    "validate_name",
    "validate_phone",
]

NAME_PATTERN = re.compile(r"^[a-zA-Z\s]+$")
EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)
PHONE_PATTERN = re.compile(
    r"^[\+]?[1-9][\d]{0,15}$|^[\(]?[\d]{3}[\)]?[\s\-]?[\d]{3}[\s\-]?[\d]{4}$"
)

MIN_NAME_LENGTH = 2
MIN_PHONE_LENGTH = 10


class ValidationErrorCode(str, Enum):
    EMPTY_FIELD = "EmptyField"
    TOO_SHORT = "TooShort"
    INVALID_CHARACTERS = "InvalidCharacters"
    INVALID_FORMAT = "InvalidFormat"


@dataclass(frozen=True)
class FieldError:
    field: str
    code: ValidationErrorCode
    message: str


def _matches(pattern: re.Pattern, value: str) -> bool:
    return pattern.fullmatch(value) is not None


def validate_name(value: str) -> Optional[FieldError]:
    if not value.strip():
        return FieldError("full_name", ValidationErrorCode.EMPTY_FIELD, "Full name is required")
    if len(value) < MIN_NAME_LENGTH:
        return FieldError("full_name", ValidationErrorCode.TOO_SHORT, "Name must be at least 2 characters")
    if not _matches(NAME_PATTERN, value):
        return FieldError(
            "full_name",
            ValidationErrorCode.INVALID_CHARACTERS,
            "Name can only contain letters and spaces",
        )
    return None


def validate_email(value: str) -> Optional[FieldError]:
    if not value.strip():
        return FieldError("email", ValidationErrorCode.EMPTY_FIELD, "Email is required")
    if not _matches(EMAIL_PATTERN, value):
        return FieldError("email", ValidationErrorCode.INVALID_FORMAT, "Please enter a valid email address")
    return None


def validate_phone(value: str) -> Optional[FieldError]:
    if not value.strip():
        return FieldError("phone", ValidationErrorCode.EMPTY_FIELD, "Phone number is required")
    if len(value) < MIN_PHONE_LENGTH:
        return FieldError("phone", ValidationErrorCode.TOO_SHORT, "Phone number must be at least 10 digits")
    if not _matches(PHONE_PATTERN, value):
        return FieldError("phone", ValidationErrorCode.INVALID_FORMAT, "Please enter a valid phone number")
    return None


_VALIDATORS: Dict[str, Callable[[str], Optional[FieldError]]] = {
    "full_name": validate_name,
    "email": validate_email,
    "phone": validate_phone,
}

FIELDS = tuple(_VALIDATORS)


def validate_field(field: str, value: str) -> Optional[FieldError]:
    try:
        validator = _VALIDATORS[field]
    except KeyError:
        raise KeyError(f"Unknown contact field: {field}") from None
    return validator(value or "")


def validate_contact(contact: ContactInfo) -> Dict[str, FieldError]:
    errors = {}
    for field in FIELDS:
        error = validate_field(field, getattr(contact, field))
        if error:
            errors[field] = error
    return errors


def require_valid(field: str, value: str) -> str:
    error = validate_field(field, value)
    if error:
        raise FieldValidationError(error)
    return value
