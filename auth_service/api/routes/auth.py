from datetime import UTC, timedelta

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, EmailStr, Field

from auth_service.api.error import ClientError, ServerError
from auth_service.api.utils.api_key import verify_api_key
from auth_service.api.utils.client import get_client_context
from auth_service.api.utils.rate_limit import enforce_rate_limit
from auth_service.app.services.reset_notifier import IResetNotifier
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.accounts import RegisterCommand, RegisterUseCase
from auth_service.app.use_cases.password_reset import (
    ConfirmPasswordResetCommand,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetUseCase,
)
from auth_service.app.use_cases.sessions import LoginUseCase, VerifySessionUseCase
from auth_service.depends import get_reset_notifier, get_unit_of_work
from config import ApplicationConfig

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    dependencies=[Depends(verify_api_key), Depends(enforce_rate_limit)],
)


class SuccessResponse(BaseModel):
    success: bool = True


def session_lifetime() -> timedelta:
    return timedelta(hours=ApplicationConfig.SESSION_LIFETIME_HOURS)


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Only presence and email shape are checked here; username and password
    rules are business rules enforced by RegisterUseCase.
    """

    username: str = Field(..., min_length=1, description="Account username (6-16 chars)")
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, description="Password")
    confirm_password: str = Field(..., min_length=1, description="Password confirmation")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def register(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Register a username/password account. Does not log the user in.

    Raises:
        - 400 Bad Request: INVALID_USERNAME, WEAK_PASSWORD, PASSWORD_MISMATCH, INVALID_INPUT
        - 409 Conflict: USERNAME_ALREADY_EXISTS, EMAIL_ALREADY_EXISTS
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        username=request.username,
        email=request.email,
        password=request.password,
        confirm_password=request.confirm_password,
    )

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_USERNAME", "WEAK_PASSWORD", "PASSWORD_MISMATCH"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code in ("USERNAME_ALREADY_EXISTS", "EMAIL_ALREADY_EXISTS"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return SuccessResponse()


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, description="Account username")
    password: str = Field(..., min_length=1, description="Account password")


class LoginHttpResponse(BaseModel):
    success: bool = True
    session_token: str


@router.post("/login", status_code=status.HTTP_201_CREATED, response_model=LoginHttpResponse)
async def login(
    request: LoginRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Login - issues a session bound to the caller's user agent and address.

    Raises:
        - 400 Bad Request: INVALID_CREDENTIALS
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, session_lifetime=session_lifetime())
    result = await use_case.execute(
        request.username, request.password, get_client_context(http_request)
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return LoginHttpResponse(session_token=result.value.session_token)


class SessionRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Session token from login")


@router.post("/session", status_code=status.HTTP_200_OK, response_model=SuccessResponse)
async def verify_session(
    request: SessionRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Verify Session - sliding expiration.

    Returns:
        - 200 OK: ``{"success": true}`` when the session is valid
        - 201 Created: ``{"success": true, "expirationTime": ...}`` when renewed

    Raises:
        - 400 Bad Request: INVALID_TOKEN, SESSION_EXPIRED
        - 409 Conflict: BINDING_MISMATCH (session has been revoked)
        - 500 Internal Server Error: Server error
    """
    use_case = VerifySessionUseCase(
        uow,
        session_lifetime=session_lifetime(),
        renewal_window=timedelta(hours=ApplicationConfig.SESSION_RENEWAL_WINDOW_HOURS),
    )
    result = await use_case.execute(request.token, get_client_context(http_request))

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "SESSION_EXPIRED"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "BINDING_MISMATCH":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    verification = result.value
    if verification.renewed:
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content={
                "success": True,
                "expirationTime": verification.expires_at.replace(tzinfo=UTC).isoformat(),
            },
        )

    return SuccessResponse()


class RequestPasswordResetRequest(BaseModel):
    username: str = Field(..., min_length=1, description="Account username")


@router.post("/password-reset", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: IResetNotifier = Depends(get_reset_notifier),
):
    """
    Request Password Reset - issues a 1 hour reset token to the account email.

    Any earlier reset token of the account stops working.

    Raises:
        - 400 Bad Request: INVALID_CREDENTIALS (unknown username)
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        notifier,
        token_lifetime=timedelta(hours=ApplicationConfig.RESET_TOKEN_LIFETIME_HOURS),
    )
    result = await use_case.execute(request.username)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return SuccessResponse()


class ConfirmPasswordResetRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Password reset token")
    password: str = Field(..., min_length=1, description="New password")
    confirm_password: str = Field(..., min_length=1, description="New password confirmation")


@router.patch("/password-reset", status_code=status.HTTP_200_OK, response_model=SuccessResponse)
async def confirm_password_reset(
    request: ConfirmPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Confirm Password Reset - consumes the token and sets the new password.

    Every existing session of the account is revoked.

    Raises:
        - 400 Bad Request: INVALID_TOKEN, TOKEN_EXPIRED, WEAK_PASSWORD, PASSWORD_MISMATCH
        - 500 Internal Server Error: Server error
    """
    command = ConfirmPasswordResetCommand(
        token=request.token,
        password=request.password,
        confirm_password=request.confirm_password,
    )

    use_case = ConfirmPasswordResetUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in (
            "INVALID_TOKEN",
            "TOKEN_EXPIRED",
            "WEAK_PASSWORD",
            "PASSWORD_MISMATCH",
        ):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return SuccessResponse()
