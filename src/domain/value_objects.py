"""
Value objects - Validated wrappers around untrusted text.

Both types validate inside their initializer, so every reachable instance
satisfies its rules. `construct()` is the public entry point; `get()` returns
the wrapped text exactly as it was submitted.

Username rules (checked in this order, first failure wins):
- fewer than MIN_LENGTH characters   -> UserNameTooShort
- MAX_LENGTH characters or more      -> UserNameTooLong
- first character in the forbidden set -> UserNameInvalidCharacter

Lengths count code points (len() of str), not encoded bytes.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from email_validator import SPECIAL_USE_DOMAIN_NAMES, EmailNotValidError, validate_email

from .exceptions import (
    EmailValidationError,
    UserNameInvalidCharacter,
    UserNameTooLong,
    UserNameTooShort,
)


def _without_reserved_domain(address: str) -> str:
    """
    Swap a special-use domain suffix (localhost, .local, .test, ...) for a
    plain label of the same length.

    email-validator rejects those names outright, but they are grammatical.
    Lengths are unchanged so the size limits still apply to the real address.
    """
    local, at, domain = address.rpartition("@")
    if not at:
        return address
    lowered = domain.lower()
    for name in SPECIAL_USE_DOMAIN_NAMES:
        if lowered == name or lowered.endswith("." + name):
            prefix = domain[: len(domain) - len(name)]
            stand_in = re.sub(r"[^.]", "x", name)
            return f"{local}@{prefix}{stand_in}"
    return address


@dataclass(frozen=True)
class EmailValue:
    """
    Email address that passed syntax validation.

    Validation uses the email-validator library with DNS checks disabled.
    Single-label and special-use domains are allowed (admin@mailserver1,
    admin@localhost). Quoted local parts are accepted; display names and
    bracketed domain literals are not.
    The stored text is never normalized.
    """

    value: str

    def __post_init__(self) -> None:
        try:
            validate_email(
                _without_reserved_domain(self.value),
                check_deliverability=False,
                globally_deliverable=False,
                allow_quoted_local=True,
            )
        except EmailNotValidError as e:
            raise EmailValidationError() from e

    @classmethod
    def construct(cls, raw: str) -> "EmailValue":
        """
        Build an EmailValue from untrusted input.

        Raises:
            EmailValidationError: If raw is not a syntactically valid address
        """
        return cls(raw)

    def get(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserNameValue:
    """Username that satisfies the length and character rules."""

    MIN_LENGTH: ClassVar[int] = 12
    MAX_LENGTH: ClassVar[int] = 32  # exclusive
    FORBIDDEN_CHARACTERS: ClassVar[str] = "!§$%&/()=?"

    value: str

    def __post_init__(self) -> None:
        if len(self.value) < self.MIN_LENGTH:
            raise UserNameTooShort()
        if len(self.value) >= self.MAX_LENGTH:
            raise UserNameTooLong()
        for char in self.value:
            if char in self.FORBIDDEN_CHARACTERS:
                raise UserNameInvalidCharacter(char)

    @classmethod
    def construct(cls, raw: str) -> "UserNameValue":
        """
        Build a UserNameValue from untrusted input.

        Raises:
            UserNameTooShort: If raw has fewer than MIN_LENGTH characters
            UserNameTooLong: If raw has MAX_LENGTH characters or more
            UserNameInvalidCharacter: On the first forbidden character found
        """
        return cls(raw)

    def get(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
