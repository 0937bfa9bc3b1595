"""Run configuration for a link check."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...utils.logger import get_logger
from ..errors import ConfigError
from .find_repo_root import find_repo_root

logger = get_logger("config.RunConfig")

CONFIG_FILE_NAME = ".mdlinkcheck.json"

# Keys a project configuration file may set; base_path comes from discovery only
_FILE_KEYS = ("dropped_extension", "relative_links")


class RunConfig(BaseModel):
    """Immutable settings shared by every document of a run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_path: Path = Field(..., description="Repository root used for default discovery")
    dropped_extension: str | None = Field(
        None, description="Extension link targets omit, appended before lookup (e.g. 'md')"
    )
    relative_links: bool = Field(False, description="Allow targets containing path separators")

    @field_validator("base_path")
    @classmethod
    def _base_path_is_directory(cls, value: Path) -> Path:
        if not value.is_dir():
            raise ValueError(f"base path is not a directory: {value}")
        return value

    @field_validator("dropped_extension")
    @classmethod
    def _normalize_extension(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().lstrip(".")
        return value or None

    @classmethod
    def discover_base_path(cls, fallback: Path | None = None, cwd: Path | None = None) -> Path:
        """Pick the base path: git work tree, else ``fallback``, else the working directory."""
        repo_root = find_repo_root(cwd)
        if repo_root is not None:
            return repo_root
        if fallback is not None:
            return fallback
        return (cwd or Path.cwd()).resolve()

    @classmethod
    def read_config_file(cls, base_path: Path) -> dict[str, Any]:
        """Read project defaults from ``<base_path>/.mdlinkcheck.json`` if present.

        Raises:
            ConfigError: If the file is not valid JSON or has unknown keys
        """
        path = base_path / CONFIG_FILE_NAME
        if not path.is_file():
            return {}

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        unknown = sorted(set(raw) - set(_FILE_KEYS))
        if unknown:
            raise ConfigError([f"{path}: unknown key '{key}'" for key in unknown])
        logger.debug(f"Loaded defaults from {path}: {raw}")
        return raw

    @classmethod
    def load(
        cls,
        base_path: Path | None = None,
        dropped_extension: str | None = None,
        relative_links: bool | None = None,
        cwd: Path | None = None,
    ) -> "RunConfig":
        """Build the run configuration.

        Command-line values win over the project configuration file, which wins
        over built-in defaults. ``base_path`` is only a fallback for when no git
        work tree is found.

        Raises:
            ConfigError: If the configuration file or a value is invalid
        """
        resolved_base = cls.discover_base_path(base_path, cwd)
        values: dict[str, Any] = {"base_path": resolved_base}
        values.update(cls.read_config_file(resolved_base))
        if dropped_extension is not None:
            values["dropped_extension"] = dropped_extension
        if relative_links is not None:
            values["relative_links"] = relative_links

        try:
            config = cls(**values)
        except ValidationError as e:
            errors = []
            for error in e.errors():
                loc = ".".join(str(x) for x in error.get("loc", ()))
                msg = error.get("msg", str(e))
                errors.append(f"{loc}: {msg}" if loc else msg)
            raise ConfigError(errors) from e

        logger.debug(f"Run configuration: {config.model_dump(mode='json')}")
        return config
