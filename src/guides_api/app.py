"""FastAPI application for the guides service.

Run with:
    uvicorn guides_api.app:app --reload

Available endpoints:
    GET /guides - List all guides
"""

import logging

from fastapi import FastAPI

from guides_api import __version__
from guides_api.config import Settings
from guides_api.router import create_router_from_path

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a FastAPI instance wired to the configured route tree.

    Args:
        settings: Settings to use; read from the environment when omitted.

    Raises:
        GuidesAPIError: If the settings or the route tree are invalid.
    """
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(title="Guides API", version=__version__)
    application.include_router(
        create_router_from_path(settings.routes_dir, prefix=settings.prefix)
    )

    logger.info(
        "Application created",
        extra={"routes_dir": str(settings.routes_dir), "prefix": settings.prefix or "(none)"},
    )
    return application


app = create_app()
