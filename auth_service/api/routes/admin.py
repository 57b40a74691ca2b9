"""
Admin API Routes - Maintenance Endpoints

Authentication is via Admin API Key, not user sessions.
"""

from fastapi import APIRouter, Depends, status

from auth_service.api.error import ServerError
from auth_service.api.utils.admin_auth import verify_admin_api_key
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.maintenance import (
    PurgeExpiredRecordsResponse,
    PurgeExpiredRecordsUseCase,
)
from auth_service.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/purge-expired",
    status_code=status.HTTP_200_OK,
    response_model=PurgeExpiredRecordsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_expired(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purge Expired Records

    Deletes sessions and password reset records whose expiry has passed.
    Meant to be called periodically by a scheduler.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    use_case = PurgeExpiredRecordsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
