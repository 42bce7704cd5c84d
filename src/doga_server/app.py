import logging
import traceback
from contextlib import asynccontextmanager
from importlib.resources import files
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from htpy.starlette import HtpyResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from doga_server.database import create_session_maker, ensure_sqlite_directory, get_session, run_migrations
from doga_server.i18n import SUPPORTED_LANGUAGES, t
from doga_server.middleware.auth import AdminAuthMiddleware
from doga_server.router import api_router, page_router
from doga_server.schemas.envelope import failure
from doga_server.services.room_ids import RoomIdResolver
from doga_server.services.storage import ObjectStorage, StorageError
from doga_server.settings import Settings
from doga_server.views.pages.error import render_error_page

logger = logging.getLogger("doga_server")

STATIC_PATH = files("doga_server").joinpath("static")


def wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "") and not request.url.path.startswith("/api/")


def request_language(request: Request) -> str:
    first = request.url.path.strip("/").split("/", 1)[0]
    if first in SUPPORTED_LANGUAGES:
        return first
    settings: Settings = request.app.state.settings
    return settings.default_language


def error_response(request: Request, status_code: int, message: str, **extra: Any) -> Response:
    if wants_html(request):
        lang = request_language(request)
        heading = t(lang, "page_not_found") if status_code == 404 else t(lang, "error")
        return HtpyResponse(
            render_error_page(lang=lang, status_code=status_code, heading=heading, message=message),
            status_code=status_code,
        )
    return JSONResponse(status_code=status_code, content=failure(message, **extra))


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    settings: Settings = app.state.settings
    try:
        ensure_sqlite_directory(settings.database_url)
        app.state.engine, app.state.db_session_maker = create_session_maker(settings.database_url)
        app.state.get_db_session = lambda read_only=False: get_session(app.state.db_session_maker, read_only)

        await run_in_threadpool(run_migrations, settings.database_url)
    except Exception as e:
        logger.warning(f"Failed to create database session: {e}")
        raise

    app.state.storage = ObjectStorage.from_settings(settings)
    logger.info(f"Object storage bucket: {settings.s3_bucket} at {settings.s3_endpoint_url}")
    try:
        await app.state.storage.check_connection()
    except StorageError as e:
        logger.warning(f"{e}; media uploads will fail until it is reachable")
    if not settings.admin_password:
        logger.warning("No admin password configured; back-office login is disabled")

    yield

    await app.state.engine.dispose()
    logger.info("Application shutdown completed")


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="Doğa Hotel",
        description="Doğa Hotel website and back-office",
        lifespan=lifespan,
    )
    app.state.settings = settings or Settings()
    app.state.room_ids = RoomIdResolver(ttl_seconds=app.state.settings.room_id_cache_seconds)
    app.add_middleware(AdminAuthMiddleware)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, e: StarletteHTTPException) -> Response:
        if e.status_code >= 500:
            logger.error(f"HTTP {e.status_code}: {e.detail} - {request.method} {request.url}")
        else:
            logger.info(f"HTTP {e.status_code}: {e.detail} - {request.method} {request.url}")
        response = error_response(request, e.status_code, str(e.detail))
        if e.headers:
            response.headers.update(e.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, e: RequestValidationError) -> Response:
        logger.error(f"Validation error on {request.method} {request.url}: {e}")
        return error_response(request, 400, "Invalid request", errors=jsonable_encoder(e.errors()))

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, e: StorageError) -> Response:
        logger.error(f"Storage error on {request.method} {request.url}: {e}")
        return error_response(request, 500, "An error occurred while uploading the file")

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, e: ValueError) -> Response:
        logger.error(f"ValueError on {request.method} {request.url}: {e}")
        return error_response(request, 400, str(e))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, e: Exception) -> Response:
        logger.error(f"Unhandled exception on {request.method} {request.url}:")
        logger.error(traceback.format_exc())
        return error_response(request, 500, "Internal server error")

    app.mount("/static", StaticFiles(directory=str(STATIC_PATH)), name="static")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/", include_in_schema=False)
    async def root_redirect() -> RedirectResponse:
        return RedirectResponse(url=f"/{app.state.settings.default_language}", status_code=307)

    app.include_router(api_router)
    app.include_router(page_router)

    return app


app = create_app()
