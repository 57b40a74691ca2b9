"""
Verify Session Use Case

Validates a session token against the presenting client and slides its
expiry forward when it is in the back half of its lifetime.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable

from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.base import utc_now
from auth_service.libs.result import Error, Result, Return
from .dtos import ClientContext, VerifySessionResponse
from .login_use_case import SESSION_LIFETIME

logger = logging.getLogger(__name__)

RENEWAL_WINDOW = timedelta(hours=3)


class VerifySessionUseCase:
    """
    Use case for session verification.

    Business Rules:
    - Unknown token: INVALID_TOKEN
    - User agent or IP differs from the bound values: session deleted,
      BINDING_MISMATCH (no re-binding, no grace period)
    - now >= expires_at: session deleted, SESSION_EXPIRED
    - Less than RENEWAL_WINDOW remaining: expires_at = now + lifetime
    - Otherwise valid, nothing written
    """

    def __init__(
        self,
        uow: UnitOfWork,
        session_lifetime: timedelta = SESSION_LIFETIME,
        renewal_window: timedelta = RENEWAL_WINDOW,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.session_lifetime = session_lifetime
        self.renewal_window = renewal_window
        self.clock = clock

    async def execute(self, token: str, client: ClientContext) -> Result[VerifySessionResponse]:
        async with self.uow:
            session = await self.uow.sessions.get_by_token(token)
            if session is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid token"))

            if session.bound_user_agent != client.user_agent or session.bound_ip != client.ip:
                await self.uow.sessions.delete(session)
                await self.uow.commit()
                logger.warning(
                    "Session for account %s presented from a different client; revoked",
                    session.account_id,
                )
                return Return.err(Error("BINDING_MISMATCH", "Conflicting User agent/IP"))

            now = self.clock()
            if now >= session.expires_at:
                await self.uow.sessions.delete(session)
                await self.uow.commit()
                return Return.err(Error("SESSION_EXPIRED", "Session expired"))

            if session.expires_at - now < self.renewal_window:
                session.expires_at = now + self.session_lifetime
                session.updated_at = now
                await self.uow.sessions.update(session)
                await self.uow.commit()
                return Return.ok(
                    VerifySessionResponse(renewed=True, expires_at=session.expires_at)
                )

            return Return.ok(VerifySessionResponse(renewed=False))
