"""GraphwalkSettings: one frozen object built from flags, env and TOML.

Sources are merged highest first:

* keyword arguments (the root CLI flags)
* ``GRAPHWALK_*`` environment variables, ``__`` for nesting
  (``GRAPHWALK_TRAVERSAL__VISIT_MODE=value``)
* the ``graphwalk.toml`` found by :func:`graphwalk.config.discovery.find_config`
* field defaults
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

from graphwalk.config.discovery import find_config
from graphwalk.config.models import TraversalConfig

# Set only while from_cli constructs an instance.
_toml_file: ContextVar[Path | None] = ContextVar("_toml_file", default=None)


class GraphwalkSettings(BaseSettings):
    """Settings for a single CLI invocation.

    Attributes:
        config_path: The TOML file that was read, or None.
        traversal: The ``[traversal]`` table.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="GRAPHWALK_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    traversal: TraversalConfig = Field(default_factory=TraversalConfig)

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
        toml_file = _toml_file.get()
        if toml_file is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_file))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **flags: Any,
    ) -> GraphwalkSettings:
        """Build settings for the root command.

        An explicit *config_path* that is not a file means "no TOML"; it
        does not fall back to discovery.
        """
        if config_path:
            candidate = Path(config_path)
            toml_file = candidate if candidate.is_file() else None
        else:
            toml_file = find_config(cwd)

        token = _toml_file.set(toml_file)
        try:
            return cls(config_path=toml_file, **flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_file}: {exc}") from exc
        finally:
            _toml_file.reset(token)
