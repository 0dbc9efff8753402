"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``FRIENDNET_*`` prefix (``FRIENDNET_GRAPH__MAX_VERTICES=5``)
  3. TOML file    — ``friendnet.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`friendnet.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from friendnet.config.discovery import find_config
from friendnet.config.models import ExportConfig, GraphConfig, ShellConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``friendnet.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path is handed to settings_customise_sources, which is a
# classmethod with no access to constructor arguments.
_tls = threading.local()


class FriendnetSettings(BaseSettings):
    """Unified settings for the friendnet CLI and shell.

    Stored on the :class:`~friendnet.commands._context.AppContext` at the
    CLI root and frozen after construction.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        sample: Seed the in-memory graph with the sample network.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FRIENDNET_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    sample: bool = False

    # --- TOML sections ---
    graph: GraphConfig = Field(default_factory=GraphConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> FriendnetSettings:
        """Construct settings from a CLI invocation.

        Uses an explicit *config_path* when given, otherwise discovers
        ``friendnet.toml`` by walking up from *start* (default: cwd).
        CLI flags are merged as highest-priority overrides; flags left off
        are dropped so ``FRIENDNET_*`` variables can still switch them on.
        """
        toml_path: Path | None = None
        if config_path:
            candidate = Path(config_path)
            if candidate.is_file():
                toml_path = candidate
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(
                config_path=toml_path,
                **{key: value for key, value in cli_flags.items() if value},
            )
        finally:
            _tls.toml_path = None
