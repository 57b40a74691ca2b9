from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from .error import ClientError, ServerError
from auth_service.app.services.rate_gate import RateGate
import logging

logger = logging.getLogger(__name__)


def failure_body(code: str, message: str) -> dict:
    return {"success": False, "message": message, "code": code}


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(
        status_code=exc.status_code,
        content=failure_body(exc.base_error.code, exc.base_error.message),
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure_body(exc.base_error.code, "Internal server error"),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    logger.warning(f"Invalid input: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=failure_body("INVALID_INPUT", message),
    )


async def handle_store_error(request: Request, exc: SQLAlchemyError):
    logger.error(f"Store failure: {type(exc).__name__}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure_body("STORE_FAILURE", "Internal server error"),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(f"Unhandled error: {type(exc).__name__}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure_body("INTERNAL_ERROR", "Internal server error"),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from auth_service.depends import init_db

    await init_db()
    yield


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Auth Service API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One gate per application; every throttled route shares it
    app.state.rate_gate = RateGate(
        interval_seconds=ApplicationConfig.RATE_LIMIT_INTERVAL_SECONDS,
        stale_after_seconds=ApplicationConfig.RATE_LIMIT_STALE_AFTER_SECONDS,
    )

    from auth_service.api.routes import admin, auth, check, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(check.router, tags=["Authentication"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
