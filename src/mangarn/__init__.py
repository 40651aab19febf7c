"""mangarn - Pack loosely-named manga page images into CBZ archives."""

from mangarn.exceptions import (
    ArchiveError,
    ConfigurationError,
    DiscoveryError,
    ExtractionError,
    FieldUndeterminedError,
    MangarnError,
    NoPagesError,
    RenumberError,
    StorageError,
    TitleMismatchError,
    TitleNotFoundError,
    ValidationError,
)
from mangarn.models import Bucket, ParsedEntry
from mangarn.naming import parse, validate

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Parsing
    "ParsedEntry",
    "Bucket",
    "parse",
    "validate",
    # Base exception
    "MangarnError",
    # Configuration
    "ConfigurationError",
    # Extraction
    "ExtractionError",
    "TitleNotFoundError",
    # Validation
    "ValidationError",
    "NoPagesError",
    "TitleMismatchError",
    "FieldUndeterminedError",
    # Storage
    "StorageError",
    "DiscoveryError",
    "ArchiveError",
    # Renumbering
    "RenumberError",
]
