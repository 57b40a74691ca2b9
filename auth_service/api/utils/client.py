from fastapi import Request

from auth_service.app.use_cases.sessions import ClientContext
from config import ApplicationConfig


def get_client_ip(request: Request) -> str:
    """Caller address; first X-Forwarded-For hop when the proxy is trusted"""
    if ApplicationConfig.TRUST_FORWARDED_FOR:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

    if request.client is None:
        return ""
    return request.client.host


def get_client_context(request: Request) -> ClientContext:
    return ClientContext(
        user_agent=request.headers.get("user-agent", ""),
        ip=get_client_ip(request),
    )
