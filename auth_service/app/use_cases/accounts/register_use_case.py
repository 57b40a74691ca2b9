"""
Register Use Case

Creates a username/password account.
"""

import asyncio
import logging
from typing import Optional

from auth_service.app.services.password_codec import PasswordCodec
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.entities import Account
from auth_service.domain.errors import CryptoFailure, DuplicateAccountError
from auth_service.domain.password_policy import is_strong_password, is_valid_username
from auth_service.libs.result import Error, Result, Return
from .dtos import RegisterCommand, RegisterResponse

logger = logging.getLogger(__name__)

DUPLICATE_ERRORS = {
    "username": Error("USERNAME_ALREADY_EXISTS", "Username already exists"),
    "email": Error("EMAIL_ALREADY_EXISTS", "Email already exists"),
}


class RegisterUseCase:
    """
    Register Use Case

    Validation order (first failure wins):
    1. Username length within 6..16 characters
    2. Username not taken
    3. Email not taken
    4. Password policy (length, upper, lower, special)
    5. Password equals confirmation

    The existence checks are best effort; the unique constraint on insert
    decides races between concurrent registrations. Registration does not
    log the user in.
    """

    def __init__(self, uow: UnitOfWork, password_codec: Optional[PasswordCodec] = None):
        self.uow = uow
        self.password_codec = password_codec or PasswordCodec()

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Returns:
            Result[RegisterResponse] or Error with one of
            INVALID_USERNAME, USERNAME_ALREADY_EXISTS, EMAIL_ALREADY_EXISTS,
            WEAK_PASSWORD, PASSWORD_MISMATCH, CRYPTO_FAILURE
        """
        if not is_valid_username(command.username):
            return Return.err(
                Error("INVALID_USERNAME", "Username does not match requirements")
            )

        async with self.uow:
            if await self.uow.accounts.get_by_username(command.username):
                return Return.err(DUPLICATE_ERRORS["username"])

            if await self.uow.accounts.get_by_email(command.email):
                return Return.err(DUPLICATE_ERRORS["email"])

            if not is_strong_password(command.password):
                return Return.err(
                    Error("WEAK_PASSWORD", "Password does not match expected criteria")
                )

            if command.password != command.confirm_password:
                return Return.err(Error("PASSWORD_MISMATCH", "Passwords do not match"))

            try:
                password_hash = await asyncio.to_thread(
                    self.password_codec.hash, command.password
                )
            except CryptoFailure:
                return Return.err(Error("CRYPTO_FAILURE", "Error processing password"))

            account = Account(
                username=command.username,
                email=command.email,
                password_hash=password_hash,
            )

            try:
                account = await self.uow.accounts.create(account)
            except DuplicateAccountError as exc:
                logger.info("Registration lost uniqueness race on %s", exc.field)
                return Return.err(DUPLICATE_ERRORS[exc.field])

            await self.uow.commit()

            logger.info("Registered account %s", account.id)

            return Return.ok(
                RegisterResponse(account_id=str(account.id), username=account.username)
            )
