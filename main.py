import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from insyd_notify.config import get_settings
from insyd_notify.infrastructure.database import engine, initialize_database
from insyd_notify.interfaces.api.errors import register_exception_handlers
from insyd_notify.interfaces.api.routes import register_routes

logger = logging.getLogger("insyd_notify.access")


def configure_logging(level: str) -> None:
    """Configure the root logger once for the running process."""

    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on start-up and release the engine on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s %s %.1fms",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
