"""
Dependency injection module for FastAPI.

This module provides dependencies that can be injected into route functions
using FastAPI's dependency injection system.
"""

# Re-exported for route dependencies so tests can override a single symbol
from patchcanvas.core.config import get_settings  # noqa: F401
