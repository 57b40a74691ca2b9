from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from auth_service.api.error import ClientError
from auth_service.app.services.identity_verifier import IIdentityTokenVerifier
from auth_service.depends import get_identity_verifier
from auth_service.libs.result import Error

router = APIRouter(prefix="/auth", tags=["Authentication"])

security = HTTPBearer(auto_error=False)


class CheckResponse(BaseModel):
    success: bool = True
    user_id: str


@router.get("/check", status_code=status.HTTP_200_OK, response_model=CheckResponse)
async def check(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    verifier: IIdentityTokenVerifier = Depends(get_identity_verifier),
):
    """
    Check an identity-provider bearer token.

    Raises:
        - 401 Unauthorized: Missing Authorization header or invalid token
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Authorization header required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = verifier.verify(credentials.credentials)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    return CheckResponse(user_id=str(result.value["sub"]))
