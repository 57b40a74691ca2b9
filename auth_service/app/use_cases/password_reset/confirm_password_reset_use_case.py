"""
Confirm Password Reset Use Case

Consumes a reset token and rotates the account password.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from auth_service.app.services.password_codec import PasswordCodec
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.base import utc_now
from auth_service.domain.errors import CryptoFailure
from auth_service.domain.password_policy import is_strong_password
from auth_service.libs.result import Error, Result, Return
from .dtos import ConfirmPasswordResetCommand, ConfirmPasswordResetResponse
from .tokens import hash_reset_token

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is looked up by its SHA-256 digest
    - Expired token: record deleted, TOKEN_EXPIRED
    - New password must pass the registration password policy and match
      its confirmation
    - On success the password hash is replaced, the record is deleted
      (single use) and every session of the account is revoked
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_codec: Optional[PasswordCodec] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.password_codec = password_codec or PasswordCodec()
        self.clock = clock

    async def execute(
        self, command: ConfirmPasswordResetCommand
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Errors:
            - INVALID_TOKEN: Token not found
            - TOKEN_EXPIRED: Token has expired (record is removed)
            - WEAK_PASSWORD: Password does not meet the policy
            - PASSWORD_MISMATCH: Confirmation differs
            - CRYPTO_FAILURE: Password could not be hashed
        """
        async with self.uow:
            record = await self.uow.reset_records.get_by_token_hash(
                hash_reset_token(command.token)
            )
            if record is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid Token"))

            now = self.clock()
            if now >= record.expires_at:
                await self.uow.reset_records.delete(record)
                await self.uow.commit()
                return Return.err(Error("TOKEN_EXPIRED", "Expired Token"))

            if not is_strong_password(command.password):
                return Return.err(
                    Error("WEAK_PASSWORD", "Password does not match expected criteria")
                )

            if command.password != command.confirm_password:
                return Return.err(Error("PASSWORD_MISMATCH", "Passwords do not match"))

            account = await self.uow.accounts.get_by_id(record.account_id)
            if account is None:
                # Account was soft-deleted after the token was issued
                await self.uow.reset_records.delete(record)
                await self.uow.commit()
                return Return.err(Error("INVALID_TOKEN", "Invalid Token"))

            try:
                password_hash = await asyncio.to_thread(
                    self.password_codec.hash, command.password
                )
            except CryptoFailure:
                return Return.err(Error("CRYPTO_FAILURE", "Error processing password"))

            account.password_hash = password_hash
            account.updated_at = now
            await self.uow.accounts.update(account)

            await self.uow.reset_records.delete(record)

            revoked = await self.uow.sessions.delete_all_by_account_id(account.id)

            await self.uow.commit()

            logger.info(
                "Password reset confirmed for account %s, %d session(s) revoked",
                account.id,
                revoked,
            )

            return Return.ok(ConfirmPasswordResetResponse(sessions_revoked=revoked))
