"""
Request Password Reset Use Case

Issues a single-use reset token and hands it to the notifier.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from auth_service.app.services.reset_notifier import IResetNotifier
from auth_service.app.services.token_generator import TokenGenerator
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.base import utc_now
from auth_service.domain.entities import PasswordResetRecord
from auth_service.domain.errors import CryptoFailure
from auth_service.libs.result import Error, Result, Return
from .dtos import RequestPasswordResetResponse
from .tokens import hash_reset_token

logger = logging.getLogger(__name__)

RESET_TOKEN_LIFETIME = timedelta(hours=1)


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Unknown username: INVALID_CREDENTIALS
    - Any earlier reset record of the account is deleted first, so only
      the newest token is ever live
    - Token is 256 bits of randomness; only its SHA-256 digest is stored
    - Token expires in 1 hour
    - Plaintext token goes to the notifier after the record is committed
    - Delivery failure removes the undeliverable record: NOTIFIER_FAILURE
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: IResetNotifier,
        token_generator: Optional[TokenGenerator] = None,
        token_lifetime: timedelta = RESET_TOKEN_LIFETIME,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.notifier = notifier
        self.token_generator = token_generator or TokenGenerator()
        self.token_lifetime = token_lifetime
        self.clock = clock

    async def execute(self, username: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Returns:
            Result with the token expiry, or Error
            (INVALID_CREDENTIALS, CRYPTO_FAILURE, NOTIFIER_FAILURE)
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_username(username)
            if account is None:
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid Username"))

            try:
                token = self.token_generator.generate()
            except CryptoFailure:
                return Return.err(Error("CRYPTO_FAILURE", "Error generating reset token"))

            await self.uow.reset_records.delete_by_account_id(account.id)

            now = self.clock()
            record = PasswordResetRecord(
                token_hash=hash_reset_token(token),
                account_id=account.id,
                expires_at=now + self.token_lifetime,
                created_at=now,
            )
            await self.uow.reset_records.create(record)

            await self.uow.commit()

        logger.info("Password reset requested for account %s", account.id)
        try:
            await self.notifier.send_reset_token(account.email, account.username, token)
        except Exception:
            logger.exception("Reset token delivery failed for account %s", account.id)
            async with self.uow:
                await self.uow.reset_records.delete(record)
                await self.uow.commit()
            return Return.err(Error("NOTIFIER_FAILURE", "Error sending reset token"))

        return Return.ok(RequestPasswordResetResponse(expires_at=record.expires_at))
