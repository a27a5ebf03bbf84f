"""
Core module initialization.
Exports configuration, logging and error utilities.
"""

from grubdash.core.config import get_settings, setup_logging, Settings, EnvironmentMode
from grubdash.core.exceptions import ResourceError, ValidationError, NotFoundError

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "ResourceError",
    "ValidationError",
    "NotFoundError",
]
