"""FastAPI application with lifespan startup."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from notediagram.logging_config import setup_logging

setup_logging()

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from notediagram import __version__  # noqa: E402
from notediagram.api.routes import analysis, diagrams, health  # noqa: E402
from notediagram.config import Settings  # noqa: E402

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = _settings
    logging.getLogger().setLevel(settings.log_level)
    app.state.settings = settings
    _logger.info(
        "event=startup version=%s delay_seconds=%.2f",
        __version__,
        settings.analysis_delay_seconds,
    )
    yield


app = FastAPI(
    title="notediagram",
    description=(
        "Heuristic note analysis --"
        " classifies free-form text and synthesizes SVG diagrams"
    ),
    version=__version__,
    openapi_url="/api/openapi.json",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

_settings = Settings()

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origin_list,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    allow_credentials=False,
)

# Routes
app.include_router(health.router)
app.include_router(analysis.router)
app.include_router(diagrams.router)
