"""
Domain exceptions - Semantic error types for value validation.

Each validated value kind owns a closed family of failures. Every failure
is a ValueError so callers outside the domain (request parsing, CLI input)
can treat it as ordinary bad input without importing the domain types.
"""


class ValueValidationError(ValueError):
    """Base class for value object validation failures."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueValidationError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class EmailValidationError(ValueValidationError):
    """Email address does not satisfy the address grammar."""

    def __init__(self, message: str = "Error with validating Email") -> None:
        super().__init__(message)


class UserNameValidationError(ValueValidationError):
    """Base class for the username failure taxonomy."""

    pass


class UserNameTooShort(UserNameValidationError):
    """Username has fewer characters than the minimum."""

    def __init__(
        self, message: str = "Username is too short; It needs a minimum length of 12 Characters"
    ) -> None:
        super().__init__(message)


class UserNameTooLong(UserNameValidationError):
    """Username reaches or exceeds the maximum length."""

    def __init__(self, message: str = "Username is too long; The maximum Length is 32") -> None:
        super().__init__(message)


class UserNameInvalidCharacter(UserNameValidationError):
    """Username contains a forbidden character."""

    __match_args__ = ("character",)

    def __init__(self, character: str) -> None:
        super().__init__(f"Invalid Character {character} in Username")
        self.character = character

    def __reduce__(self) -> tuple[type, tuple[str]]:
        return type(self), (self.character,)
