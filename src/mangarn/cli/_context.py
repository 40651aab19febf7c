"""Runtime context for CLI commands.

This module provides a typed runtime context that is initialized once
in the main callback and available to all commands via ctx.obj.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from mangarn.exceptions import ConfigurationError
from mangarn.settings import Settings, get_settings, load_settings_from_file

logger = logging.getLogger(__name__)


@dataclass
class RuntimeContext:
    """Typed runtime context available to all commands via ctx.obj.

    Example:
        @app.command()
        def my_command(ctx: typer.Context) -> None:
            runtime: RuntimeContext = ctx.obj
            run_pack(runtime.directory, runtime.settings, dry_run=runtime.dry_run)
    """

    directory: Path
    dry_run: bool = False
    verbose: bool = False
    env_file: Path | None = None

    # Lazy-loaded (read from the environment on first use)
    _settings: Settings | None = field(default=None, repr=False)

    @property
    def settings(self) -> Settings:
        """Get settings (lazy-loaded).

        An explicit env_file is loaded on top of the environment and .env.

        Raises:
            ConfigurationError: If an environment variable has an invalid value.
        """
        if self._settings is None:
            try:
                if self.env_file is not None:
                    self._settings = load_settings_from_file(self.env_file)
                else:
                    self._settings = get_settings()
            except PydanticValidationError as e:
                first = e.errors()[0] if e.errors() else {}
                loc = first.get("loc", ())
                raise ConfigurationError(
                    f"Invalid settings: {first.get('msg', e)}",
                    env_file=self.env_file,
                    field=".".join(str(part) for part in loc) or None,
                ) from e
            logger.debug("Loaded settings: %s", self._settings)
        return self._settings


def get_runtime_context(ctx_obj: object) -> RuntimeContext:
    """Extract RuntimeContext from typer context object.

    Raises:
        TypeError: If ctx_obj is not a RuntimeContext
    """
    if isinstance(ctx_obj, RuntimeContext):
        return ctx_obj

    raise TypeError(
        f"Expected RuntimeContext, got {type(ctx_obj).__name__}. "
        "Ensure the main callback initializes ctx.obj properly."
    )
