"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..app import Application
from ..logging_config import get_logger
from .routes import create_observability_router, create_trace_router

logger = get_logger(__name__)


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    if application is None:
        application = Application()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Object Trace Frontend",
        description="Resolves Kubernetes object identities to Jaeger traces",
        version="0.1.0",
        lifespan=lifespan,
    )

    fastapi_app.include_router(create_observability_router(application))
    if application.settings.enable_trace_server:
        fastapi_app.include_router(create_trace_router(application))
    else:
        logger.warning("Trace server disabled, set TRACE_SERVER_ENABLE=true to enable it")

    return fastapi_app
