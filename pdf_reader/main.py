"""
FastAPI application entry point.

Serves the reader session to a browser: one controller per process, created
at startup and closed at shutdown.

Dependencies: fastapi, pdf_reader.api, pdf_reader.observability, pdf_reader.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdf_reader import __version__
from pdf_reader.api import api_router
from pdf_reader.application.controller import ReaderController
from pdf_reader.boundary.viewport import RecordingViewport
from pdf_reader.configs import get_settings
from pdf_reader.observability.logger import configure_logging
from pdf_reader.observability.middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Creates the reader controller on startup; on shutdown waits for pending
    requests, releases the document handle and closes the HTTP client.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Application startup: remote service at {settings.api_url}")

    controller = ReaderController(settings=settings, viewport=RecordingViewport())
    app.state.controller = controller

    yield

    await controller.aclose()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="PDF Reader",
        description="Upload a PDF and ask questions about its content",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("pdf_reader.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
