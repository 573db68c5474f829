"""FastAPI application factory for the Assessment Genie API"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from genie.auth.google_client import GoogleUserInfoClient
from genie.auth.service import AuthService
from genie.services.topic_request_store import TopicRequestStore
from genie.services.user_store import UserStore
from genie.utils.config import Settings, load_settings
from genie.utils.exceptions import GenieError
from genie.utils.logger import get_logger, setup_logging

from .auth_routes import router as auth_router
from .blueprint_routes import router as blueprint_router
from .topic_routes import router as topic_router

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    google_client: Optional[GoogleUserInfoClient] = None,
) -> FastAPI:
    """Build the app; every collaborator hangs off app.state, nothing is global"""
    settings = settings or load_settings()
    setup_logging(
        level=settings.logging.level,
        fmt=settings.logging.format,
        file_path=settings.logging.file_path,
        max_bytes=settings.logging.max_bytes,
        backup_count=settings.logging.backup_count,
    )

    app = FastAPI(
        title=f"{settings.app.name} API",
        description="Assessment blueprint and authentication service",
        version=settings.app.version,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    user_store = UserStore(settings.data_dir)
    app.state.auth_service = AuthService(
        settings.auth,
        user_store,
        google_client
        or GoogleUserInfoClient(
            userinfo_url=settings.google.userinfo_url,
            timeout=settings.google.timeout_seconds,
        ),
    )
    app.state.topic_store = TopicRequestStore(settings.data_dir)

    @app.exception_handler(GenieError)
    async def genie_error_handler(request: Request, exc: GenieError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                path=request.url.path,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            message = exc.message
        else:
            message = exc.detail
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": message},
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"message": "Invalid request", "errors": _validation_errors(exc)},
        )

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {settings.app.name} API"}

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    app.include_router(auth_router)
    app.include_router(blueprint_router)
    app.include_router(topic_router)

    logger.info("App created", environment=settings.app.environment)
    return app


def _validation_errors(exc: RequestValidationError):
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
