"""
Purge Expired Records Use Case

Removes sessions and password reset records past their expiry. Expiry is
still checked whenever a token is read; this only reclaims storage.
"""

import logging
from datetime import datetime
from typing import Callable

from pydantic import BaseModel

from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.base import utc_now
from auth_service.libs.result import Result, Return

logger = logging.getLogger(__name__)


class PurgeExpiredRecordsResponse(BaseModel):
    """Response DTO for PurgeExpiredRecordsUseCase"""

    sessions_purged: int
    reset_records_purged: int


class PurgeExpiredRecordsUseCase:
    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[PurgeExpiredRecordsResponse]:
        async with self.uow:
            now = self.clock()
            sessions_purged = await self.uow.sessions.delete_expired(now)
            reset_records_purged = await self.uow.reset_records.delete_expired(now)
            await self.uow.commit()

        logger.info(
            "Purged %d expired session(s) and %d expired reset record(s)",
            sessions_purged,
            reset_records_purged,
        )

        return Return.ok(
            PurgeExpiredRecordsResponse(
                sessions_purged=sessions_purged,
                reset_records_purged=reset_records_purged,
            )
        )
