"""
FastAPI application bootstrap with: \n
- Logging configured from `settings.LOG_LEVEL` \n
- Lifespan-managed database schema bootstrap \n
- CORS configured for the frontend \n
- Reaction routes \n

Environment contract (from `settings`): \n
- INIT_MODE: if 'runtime', create/upgrade the database schema during startup. \n
- FRONTEND_URL: allowed CORS origin. \n

Run with: ``uvicorn xconfess.main:app``
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from xconfess.api.fast_api import router
from xconfess.database.config.config import settings
from xconfess.database.helpers.schema import initialize_schema

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    App lifespan manager.

    Notes
    ------------
    - On startup: if INIT_MODE == 'runtime', create missing tables and
      upgrade legacy ones.
    """
    if settings.INIT_MODE == "runtime":
        initialize_schema()
        logger.info("Database schema ready.")
    else:
        logger.info("Skipping schema bootstrap (INIT_MODE=%s).", settings.INIT_MODE)
    yield
    logger.info("App shutting down.")


app = FastAPI(title="XConfess Reactions", lifespan=lifespan)
"""Instantiates the FastAPI application object."""

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
