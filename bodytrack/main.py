"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from bodytrack.api import api_router
from bodytrack.api.responses import failure
from bodytrack.core.config import Settings, get_settings
from bodytrack.db.session import dispose_engine
from bodytrack.services.repository import MemoryBodyDataStore
from bodytrack.services.validation import missing_field_messages

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Nothing to open on startup (engine is lazy); dispose the pool on shutdown."""
    logger.info("Starting %s with %s backend", app.title, app.state.settings.data_backend)
    yield
    await dispose_engine()


def _describe_error(err: dict) -> str:
    loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are reported like field validation failures (400, not 422).

    For body data submissions the presence checks still run on the raw body,
    so a missing date is reported alongside a type error in another field.
    """
    errors = [_describe_error(e) for e in exc.errors()]
    body_data_path = f"{request.app.state.settings.api_prefix}/body-data"
    if request.method == "POST" and request.url.path == body_data_path and isinstance(exc.body, dict):
        errors = missing_field_messages(exc.body) + errors
    logger.info("Malformed request to %s: %s", request.url.path, errors)
    return failure(400, "; ".join(errors) or "Invalid request", errors)


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    # One store per app instance; None means requests get a DB session instead
    app.state.body_data_store = MemoryBodyDataStore() if settings.data_backend == "memory" else None

    # CORS: allow everything in debug, localhost in dev, CORS_ORIGINS env in production
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_application()
