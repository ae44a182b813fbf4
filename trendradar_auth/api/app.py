import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from trendradar_auth.domain.exceptions import ForbiddenError, StorageError
from .error import ClientError, ServerError
from .log_config import configure_logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_forbidden(request: Request, exc: ForbiddenError):
    error_dict = {"code": "FORBIDDEN", "message": "Insufficient permissions"}
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"error": error_dict})


async def handle_storage_error(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.url.path}: {exc}")
    error_dict = {
        "code": "STORAGE_UNAVAILABLE",
        "message": "Service temporarily unavailable, please try again",
    }
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"error": error_dict}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from trendradar_auth.app.services.session_sweeper import SessionSweeper
    from trendradar_auth.depends import unit_of_work_scope

    config = app.state.config
    sweeper = SessionSweeper(unit_of_work_scope, config.SESSION_SWEEP_INTERVAL_SECONDS)
    app.state.session_sweeper = sweeper
    sweeper.start()

    yield

    await sweeper.stop()


def create_app(ApplicationConfig) -> FastAPI:
    from config import validate_config

    validate_config(ApplicationConfig)
    configure_logging(ApplicationConfig.LOG_LEVEL)

    app = FastAPI(title="TrendRadar Auth", version="0.1.0", lifespan=lifespan)
    app.state.config = ApplicationConfig

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from trendradar_auth.api.routes import admin, auth, health_check, sessions

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(sessions.router, tags=["Sessions"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(ForbiddenError, handle_forbidden)
    app.add_exception_handler(StorageError, handle_storage_error)

    logger.info("TrendRadar auth service configured")
    return app
