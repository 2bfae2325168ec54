"""
ProfileSync Common Utilities

Shared error types, logging and decorators.
"""

from .exceptions import (
    ProfileSyncError, ConfigError, InvalidPlatformError, CatalogError,
    DuplicateMappingError, CatalogLoadError, PlanError, MigrationItemError,
    OutcomeAlreadyRecordedError, TemplateError, TemplateNotFoundError,
)
from .decorators import timed
from .logging_config import setup_logging, LogContext, ColoredFormatter, JSONFormatter

__all__ = [
    # Exceptions
    "ProfileSyncError", "ConfigError", "InvalidPlatformError", "CatalogError",
    "DuplicateMappingError", "CatalogLoadError", "PlanError", "MigrationItemError",
    "OutcomeAlreadyRecordedError", "TemplateError", "TemplateNotFoundError",
    # Decorators
    "timed",
    # Logging
    "setup_logging", "LogContext", "ColoredFormatter", "JSONFormatter",
]
