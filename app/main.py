from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.interfaces.api.routes import register_routes
from app.interfaces.api.routes_helpers import request_validation_handler
from app.infrastructure.database import engine, initialize_database
from app.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize logging and the database on startup, release the engine on shutdown."""

    setup_logging(get_settings().log_level)
    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    register_routes(app)
    return app


app = create_app()
