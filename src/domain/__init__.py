"""
Domain layer - Pure validation logic with zero framework imports.

This package contains the validated value objects accepted by the signup
API and the error taxonomy reported when raw input is rejected. Nothing in
here performs I/O or keeps state between calls.
"""

from .exceptions import (
    EmailValidationError,
    UserNameInvalidCharacter,
    UserNameTooLong,
    UserNameTooShort,
    UserNameValidationError,
    ValueValidationError,
)
from .value_objects import EmailValue, UserNameValue

__all__ = [
    "EmailValidationError",
    "EmailValue",
    "UserNameInvalidCharacter",
    "UserNameTooLong",
    "UserNameTooShort",
    "UserNameValidationError",
    "UserNameValue",
    "ValueValidationError",
]
