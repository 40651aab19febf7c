"""Environment-based settings using pydantic-settings.

Every setting has a default that reproduces the plain "run in this
directory" behaviour, so no configuration is required.

Usage:
    from mangarn.settings import get_settings

    settings = get_settings()
    print(settings.output_dir)  # From MANGARN_OUTPUT_DIR env var

Environment Variables:
    MANGARN_OUTPUT_DIR - Archive output directory, relative to the working
        directory unless absolute (default: "output")
    MANGARN_IGNORE_FILES - JSON list of file names to skip during discovery
        (default: [".DS_Store", "Thumbs.db", "desktop.ini", ".env"])
    MANGARN_LOG_LEVEL - Logging level (default: "INFO")
    MANGARN_LOG_FILE - Optional log file path (always logs DEBUG)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# OS metadata and config files that are never pages
DEFAULT_IGNORE_FILES: tuple[str, ...] = (".DS_Store", "Thumbs.db", "desktop.ini", ".env")

# Read from the current working directory when present
DEFAULT_ENV_FILE = Path(".env")


class Settings(BaseSettings):
    """mangarn settings from environment variables (and an optional .env)."""

    model_config = SettingsConfigDict(
        env_prefix="MANGARN_",
        env_file=DEFAULT_ENV_FILE,
        extra="ignore",
    )

    output_dir: Path = Field(
        default=Path("output"),
        description="Directory that receives the .cbz archives",
    )
    ignore_files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_FILES),
        description="File names skipped during discovery",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Path | None = Field(default=None, description="Optional log file")

    # Set by load_settings_from_file so discovery can skip the file
    _env_file: Path | None = PrivateAttr(default=None)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"MANGARN_LOG_LEVEL must be one of {valid_levels}, got: {v}")
        return upper

    @field_validator("output_dir")
    @classmethod
    def validate_output_dir(cls, v: Path) -> Path:
        """Reject writing archives next to the pages themselves."""
        if str(v) == ".":
            raise ValueError("MANGARN_OUTPUT_DIR must name a directory other than '.'")
        return v

    def resolve_output_dir(self, directory: Path) -> Path:
        """Return the output directory for a run in the given working directory."""
        if self.output_dir.is_absolute():
            return self.output_dir
        return directory / self.output_dir

    def page_ignores(self, directory: Path) -> list[str]:
        """File names discovery skips in a working directory.

        This is ignore_files plus the log file and the env files settings
        were read from, when they live directly in the directory.
        """
        names = list(self.ignore_files)
        root = directory.resolve()
        for path in (self.log_file, DEFAULT_ENV_FILE, self._env_file):
            if path is not None and path.resolve().parent == root:
                names.append(path.name)
        return names


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings.

    Returns:
        Settings instance read from the environment on first call.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the cached settings.

    Useful for testing to ensure fresh settings are loaded.
    """
    get_settings.cache_clear()


def load_settings_from_file(env_file: Path) -> Settings:
    """Load settings from a specific .env file.

    Args:
        env_file: Path to .env file to load.

    Returns:
        Settings instance with configuration from the file.
    """
    from dotenv import load_dotenv

    # Load the env file into os.environ
    load_dotenv(env_file, override=True)

    # Clear cache and reload
    clear_settings_cache()
    settings = get_settings()
    settings._env_file = Path(env_file)
    return settings
