"""
Login Use Case

Authenticates a username/password pair and issues a bound session.
"""

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from auth_service.app.services.password_codec import PasswordCodec
from auth_service.app.services.token_generator import TokenGenerator
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.base import utc_now
from auth_service.domain.entities import Session
from auth_service.domain.errors import CryptoFailure
from auth_service.libs.result import Error, Result, Return
from .dtos import ClientContext, LoginResponse

logger = logging.getLogger(__name__)

SESSION_LIFETIME = timedelta(hours=6)

# Well-formed but unmatchable hash, verified when the username is unknown
_DUMMY_HASH = "0" * 128


class LoginUseCase:
    """
    Use case for login and session issuance.

    Business Rules:
    - Unknown username and wrong password give the same error
    - A KDF run happens even for unknown usernames to keep timing flat
    - Session token is 256 bits of randomness, stored as the session key
    - Session expires 6 hours after issuance
    - Session is bound to the presented user agent and client IP
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_codec: Optional[PasswordCodec] = None,
        token_generator: Optional[TokenGenerator] = None,
        session_lifetime: timedelta = SESSION_LIFETIME,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.password_codec = password_codec or PasswordCodec()
        self.token_generator = token_generator or TokenGenerator()
        self.session_lifetime = session_lifetime
        self.clock = clock

    async def execute(
        self, username: str, password: str, client: ClientContext
    ) -> Result[LoginResponse]:
        """
        Execute login use case.

        Returns:
            Result with LoginResponse, or Error
            (INVALID_CREDENTIALS, CRYPTO_FAILURE)
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_username(username)

            stored_hash = account.password_hash if account else _DUMMY_HASH
            password_valid = await asyncio.to_thread(
                self.password_codec.verify, stored_hash, password
            )

            if account is None or not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username or password")
                )

            try:
                token = self.token_generator.generate()
            except CryptoFailure:
                return Return.err(Error("CRYPTO_FAILURE", "Error generating session"))

            now = self.clock()
            session = Session(
                token=token,
                account_id=account.id,
                bound_user_agent=client.user_agent,
                bound_ip=client.ip,
                expires_at=now + self.session_lifetime,
                created_at=now,
                updated_at=now,
            )
            await self.uow.sessions.create(session)

            await self.uow.commit()

            logger.info("Issued session for account %s", account.id)

            return Return.ok(
                LoginResponse(session_token=token, expires_at=session.expires_at)
            )
