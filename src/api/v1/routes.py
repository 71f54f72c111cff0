"""
API v1 routes.

Defines the HTTP endpoints of the signup API:
- GET /hello - Static HTML greeting
- POST /user/create - Accept a user record with a validated username and email
"""

import logging

from fastapi import APIRouter, Response, status
from fastapi.responses import HTMLResponse

from src.api.models import CreateUserRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])


@router.get(
    "/hello",
    response_class=HTMLResponse,
    summary="Greeting page",
)
async def hello() -> str:
    """Return a static HTML greeting."""
    return "<p> Hello World</p>"


@router.post(
    "/user/create",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={200: {"description": "User record accepted"}},
    summary="Create a new user",
    description="Submit a username and email address. Both fields are validated "
    "before the record is accepted; any invalid field rejects the whole record.",
)
async def create_user(request_data: CreateUserRequest) -> Response:
    """
    Accept a user record.

    - **username**: 12 to 31 characters, none of `!§$%&/()=?`
    - **email**: Syntactically valid email address

    The request body is parsed into value objects before this handler runs,
    so reaching it means both fields are valid.
    """
    logger.info("Accepted user record for username %s", request_data.username.get())
    return Response(status_code=status.HTTP_200_OK)
