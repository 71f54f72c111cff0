"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Fields typed as domain value objects are parsed through the value object's
`construct()`, so a record only validates when every such field does.
"""

from typing import Annotated, Any

from pydantic import BaseModel, PlainSerializer, PlainValidator, WithJsonSchema

from src.domain.value_objects import EmailValue, UserNameValue


def _parse_email(value: Any) -> EmailValue:
    if isinstance(value, EmailValue):
        return value
    if not isinstance(value, str):
        raise ValueError("Email must be a string")
    return EmailValue.construct(value)


def _parse_username(value: Any) -> UserNameValue:
    if isinstance(value, UserNameValue):
        return value
    if not isinstance(value, str):
        raise ValueError("Username must be a string")
    return UserNameValue.construct(value)


EmailField = Annotated[
    EmailValue,
    PlainValidator(_parse_email),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "format": "email"}),
]

UserNameField = Annotated[
    UserNameValue,
    PlainValidator(_parse_username),
    PlainSerializer(str, return_type=str),
    WithJsonSchema(
        {
            "type": "string",
            "minLength": UserNameValue.MIN_LENGTH,
            "maxLength": UserNameValue.MAX_LENGTH - 1,
        }
    ),
]


class CreateUserRequest(BaseModel):
    """Request model for user creation."""

    username: UserNameField
    email: EmailField
