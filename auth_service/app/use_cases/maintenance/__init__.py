"""Maintenance use cases."""

from .purge_expired_records_use_case import (
    PurgeExpiredRecordsUseCase,
    PurgeExpiredRecordsResponse,
)

__all__ = [
    "PurgeExpiredRecordsUseCase",
    "PurgeExpiredRecordsResponse",
]
