"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
"""

from pdf_reader.configs.settings import ReaderSettings, get_settings

__all__ = ["ReaderSettings", "get_settings"]
