from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payment_server import __version__
from payment_server.api import create_api_router
from payment_server.api.errors import register_exception_handlers
from payment_server.core.config import Settings, get_settings
from payment_server.core.container import ApplicationContainer
from payment_server.core.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    await container.startup()
    try:
        yield
    finally:
        await container.shutdown()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Payment records with a JSON mirror and websocket change feed",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = ApplicationContainer.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=settings.cors.allow_methods,
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(create_api_router(settings))

    return app


app = create_app()
