import logging

from fastapi import Request, status

from auth_service.api.error import ClientError
from auth_service.api.utils.client import get_client_ip
from auth_service.libs.result import Error

logger = logging.getLogger(__name__)


async def enforce_rate_limit(request: Request):
    """
    Admit one request per client address per interval.

    Uses the RateGate created by create_app (``app.state.rate_gate``).

    Raises:
        ClientError: 429 when the previous request from this address was too recent
    """
    client_ip = get_client_ip(request)
    if not request.app.state.rate_gate.allow(client_ip):
        logger.info(f"Rate limit exceeded for {client_ip}")
        raise ClientError(
            Error("RATE_LIMITED", "Rate limit exceeded. Please try again in a moment."),
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        )
