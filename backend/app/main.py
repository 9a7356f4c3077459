import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import simulation, system
from app.config import get_settings
from tanksim.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Creating FastAPI application title=%s version=%s",
        settings.api_title,
        settings.api_version,
    )
    application = FastAPI(title=settings.api_title, version=settings.api_version)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(system.router)
    application.include_router(simulation.router)
    return application


app = create_app()
