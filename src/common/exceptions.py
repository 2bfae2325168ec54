"""
ProfileSync Exception Hierarchy

Provides clear, actionable error messages with structured information
for logging, user feedback, and programmatic error handling.
"""

from typing import Optional, Dict, Any


class ProfileSyncError(Exception):
    """
    Base exception for all ProfileSync errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional context as key-value pairs
        cause: Original exception that caused this error
        recoverable: Whether the error is recoverable
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        self.recoverable = recoverable

    def __str__(self):
        s = f"[{self.code}] {self.message}"
        if self.details:
            s += f" (details: {self.details})"
        if self.cause:
            s += f" caused by: {self.cause}"
        return s

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# Configuration errors
# =============================================================================

class ConfigError(ProfileSyncError):
    """Base for configuration errors."""
    pass


class InvalidPlatformError(ConfigError):
    """Unrecognized platform name."""
    def __init__(self, value: str, valid: tuple = ("linux", "macos", "windows")):
        super().__init__(
            f"Invalid platform: {value}. Must be one of: {', '.join(valid)}",
            code="INVALID_PLATFORM",
            details={"value": value, "valid": list(valid)},
            recoverable=False,
        )


# =============================================================================
# Catalog errors
# =============================================================================

class CatalogError(ProfileSyncError):
    """Base for mapping catalog errors."""
    pass


class DuplicateMappingError(CatalogError):
    """Two catalog entries share a source fragment."""
    def __init__(self, fragment: str):
        super().__init__(
            f"Duplicate mapping for source fragment '{fragment}'",
            code="DUPLICATE_MAPPING",
            details={"fragment": fragment},
            recoverable=False,
        )


class CatalogLoadError(CatalogError):
    """Catalog file could not be read or parsed."""
    def __init__(self, path: str, reason: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Failed to load catalog {path}: {reason}",
            code="CATALOG_LOAD_FAILED",
            details={"path": path, "reason": reason},
            cause=cause,
            recoverable=False,
        )


# =============================================================================
# Planning errors
# =============================================================================

class PlanError(ProfileSyncError):
    """Migration plan could not be constructed."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            code="PLAN_FAILED",
            details=details,
            recoverable=False,
        )


# =============================================================================
# Execution errors
# =============================================================================

class MigrationItemError(ProfileSyncError):
    """Base for per-item state errors."""
    pass


class OutcomeAlreadyRecordedError(MigrationItemError):
    """An item already carries an outcome."""
    def __init__(self, source_path: str, status: str):
        super().__init__(
            f"Outcome already recorded for {source_path}: {status}",
            code="OUTCOME_ALREADY_RECORDED",
            details={"source_path": source_path, "status": status},
            recoverable=False,
        )


# =============================================================================
# Template errors
# =============================================================================

class TemplateError(ProfileSyncError):
    """Template-related errors."""
    pass


class TemplateNotFoundError(TemplateError):
    """Template not found."""
    def __init__(self, template_name: str):
        super().__init__(
            f"Template not found: {template_name}",
            code="TEMPLATE_NOT_FOUND",
            details={"template": template_name},
        )
