"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: pdf_reader.configs, pdf_reader.application
System role: DI container for controller injection
"""

from fastapi import HTTPException, Request

from pdf_reader.application.controller import ReaderController
from pdf_reader.configs import ReaderSettings, get_settings


def get_settings_dependency() -> ReaderSettings:
    """Get settings singleton."""
    return get_settings()


def get_controller(request: Request) -> ReaderController:
    """
    Get the process-wide reader controller.

    The controller is created in the application lifespan and stored on
    app.state.

    Args:
        request: Incoming request

    Returns:
        ReaderController: Controller owning the reader session

    Raises:
        HTTPException(503): Application started without a controller
    """
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise HTTPException(status_code=503, detail="Reader controller not initialized")
    return controller
