"""
mangarn exception hierarchy.

Provides typed exceptions for better error handling and clearer error messages.

Exception Hierarchy:
    MangarnError (base)
    ├── ConfigurationError - Invalid environment/.env settings
    ├── ExtractionError - File name could not be turned into a usable entry
    │   └── TitleNotFoundError - No series title could be inferred
    ├── ValidationError - Grouping stage rejected the set of entries
    │   ├── NoPagesError - Nothing to pack
    │   ├── TitleMismatchError - More than one series in a run
    │   └── FieldUndeterminedError - Required field has no value
    ├── StorageError - Filesystem failures
    │   ├── DiscoveryError - Directory listing failures
    │   └── ArchiveError - CBZ write/copy failures
    └── RenumberError - Renumbering plan or rename failures
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class MangarnError(Exception):
    """Base exception for all mangarn errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """
        Initialize mangarn exception.

        Args:
            message: Human-readable error message
            details: Optional structured error details for logging/debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MangarnError):
    """Environment or .env settings error."""

    def __init__(
        self,
        message: str,
        *,
        env_file: Path | str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if env_file:
            details["env_file"] = str(env_file)
        if field:
            details["field"] = field
        super().__init__(message, details=details)
        self.env_file = env_file
        self.field = field


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractionError(MangarnError):
    """A file name could not be turned into a usable entry."""

    def __init__(
        self,
        message: str,
        *,
        file_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if file_name:
            details["file_name"] = file_name
        super().__init__(message, details=details)
        self.file_name = file_name


class TitleNotFoundError(ExtractionError):
    """No series title could be inferred from a file name."""

    def __init__(self, message: str = "unable to parse title from filename", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(MangarnError):
    """The grouping stage rejected the set of parsed entries."""

    def __init__(
        self,
        message: str,
        *,
        errors: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if errors:
            details["errors"] = errors
        super().__init__(message, details=details)
        self.errors = errors or []


class NoPagesError(ValidationError):
    """No page files were found to pack."""

    pass


class TitleMismatchError(ValidationError):
    """Two files in one run produced different titles."""

    def __init__(
        self,
        message: str,
        *,
        expected: str | None = None,
        got: str | None = None,
        file_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.get("details", {})
        if expected is not None:
            details["expected"] = expected
        if got is not None:
            details["got"] = got
        if file_name:
            details["file_name"] = file_name
        kwargs["details"] = details
        super().__init__(message, **kwargs)
        self.expected = expected
        self.got = got
        self.file_name = file_name


class FieldUndeterminedError(ValidationError):
    """A field required for packing could not be determined."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        file_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.get("details", {})
        if field:
            details["field"] = field
        if file_name:
            details["file_name"] = file_name
        kwargs["details"] = details
        super().__init__(message, **kwargs)
        self.field = field
        self.file_name = file_name


# =============================================================================
# Storage Errors
# =============================================================================


class StorageError(MangarnError):
    """Filesystem read/write failure."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = str(path)
        super().__init__(message, details=details)
        self.path = path


class DiscoveryError(StorageError):
    """Directory listing failure."""

    pass


class ArchiveError(StorageError):
    """CBZ archive creation failure."""

    def __init__(
        self,
        message: str,
        *,
        source_path: Path | str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.get("details", {})
        if source_path:
            details["source_path"] = str(source_path)
        kwargs["details"] = details
        super().__init__(message, **kwargs)
        self.source_path = source_path


# =============================================================================
# Renumbering Errors
# =============================================================================


class RenumberError(MangarnError):
    """Renumbering could not be planned or applied."""

    def __init__(
        self,
        message: str,
        *,
        file_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if file_name:
            details["file_name"] = file_name
        super().__init__(message, details=details)
        self.file_name = file_name
