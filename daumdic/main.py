"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from daumdic import __version__
from daumdic.config import settings
from daumdic.logging_config import setup_logging
from daumdic.routes import search_router

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info(f"Starting daumdic API (dictionary: {settings.dictionary_url})")
    yield
    logger.info("Shutting down daumdic API...")


app = FastAPI(
    title="daumdic",
    description="Daum dictionary lookup API",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(search_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
    }


def run(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "daumdic.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


if __name__ == "__main__":
    run()
