"""FastAPI dependencies."""

from .dependencies import get_controller, get_settings_dependency

__all__ = ["get_controller", "get_settings_dependency"]
