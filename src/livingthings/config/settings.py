"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs:   CLI flags passed by Click
  2. Env vars:      ``LIVINGTHINGS_*`` prefix, ``__`` for nested sections
  3. TOML file:     ``livingthings.toml``, see :mod:`livingthings.config.discovery`
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from livingthings.config.discovery import find_config
from livingthings.config.models import ErrorsConfig, PaginationConfig

# TOML file for the settings object currently being built.
_toml_path: ContextVar[Path | None] = ContextVar("livingthings_toml_path", default=None)


class LivingThingsSettings(BaseSettings):
    """Frozen settings for one CLI invocation.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        errors: ``[errors]`` section.
        pagination: ``[pagination]`` section.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="LIVINGTHINGS_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    errors: ErrorsConfig = Field(default_factory=ErrorsConfig)
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_path = _toml_path.get()
        if toml_path is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> LivingThingsSettings:
        """Build settings for a CLI run.

        An explicit *config_path* is used only if it names a file; otherwise
        ``livingthings.toml`` is discovered from *start*.

        Raises:
            click.ClickException: if the TOML file cannot be parsed.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        token = _toml_path.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _toml_path.reset(token)
