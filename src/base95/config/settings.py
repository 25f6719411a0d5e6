"""Base95Settings: one frozen object built from every configuration layer.

Earlier layers win: CLI flags, then ``BASE95_*`` environment variables
(``__`` separates nested sections, e.g. ``BASE95_CHAIN__STEPS``), then
``base95.toml``, then the section model defaults.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from base95.config.discovery import find_config
from base95.config.models import ChainConfig, SimulateConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``base95.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed from from_cli() to settings_customise_sources().
_tls = threading.local()


class Base95Settings(BaseSettings):
    """Unified settings for the base95 CLI and services.

    Frozen after construction and stored on the CLI ``AppContext``.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BASE95_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    chain: ChainConfig = Field(default_factory=ChainConfig)
    simulate: SimulateConfig = Field(default_factory=SimulateConfig)

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
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> Base95Settings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise discovers ``base95.toml``
        by walking up from *start* (default: cwd).
        """
        toml_path = _resolve_toml(config_path, start)
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None


def _resolve_toml(config_path: str | None, start: Path | None) -> Path | None:
    # An explicit path that does not exist means "no file", not "search".
    if config_path:
        path = Path(config_path)
        return path if path.is_file() else None
    return find_config(start)
