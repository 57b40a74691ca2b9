"""
API Key Authentication

Static shared-secret gate in front of the authentication operations.
"""

import hmac

from fastapi import Header, status
from auth_service.libs.result import Error
from auth_service.api.error import ClientError, ServerError
from config import ApplicationConfig


async def verify_api_key(x_api_key: str = Header(None)):
    """
    Verify the shared API key from the X-API-Key header.

    Raises:
        ServerError: 500 if no API key is configured
        ClientError: 401 if the header is missing or does not match

    Returns:
        True if valid
    """
    configured_key = ApplicationConfig.API_KEY
    if not configured_key:
        raise ServerError(Error("API_KEY_NOT_CONFIGURED", "API key not configured"))

    if not x_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "API key is required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not hmac.compare_digest(x_api_key.encode(), configured_key.encode()):
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
