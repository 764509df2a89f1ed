"""Configuration management using pydantic-settings."""

import tomllib
from datetime import datetime
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.services import DEFAULT_EXTENSION

DEFAULT_OUTPUT_ROOT = "."
CONFIG_PATH = Path("~/.config/odt-creator/config.toml").expanduser()


class PathsConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ODT_CREATOR_PATHS_")

    output_root: Path = Path(DEFAULT_OUTPUT_ROOT)

    @field_validator("output_root", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser()


class DocumentConfig(BaseSettings):
    """Document file settings."""

    model_config = SettingsConfigDict(env_prefix="ODT_CREATOR_DOCUMENT_")

    extension: str = DEFAULT_EXTENSION
    # Fixed meta.xml timestamp; None records the time of writing
    creation_date: datetime | None = None

    @field_validator("extension")
    @classmethod
    def leading_dot(cls, v: str) -> str:
        if v and not v.startswith("."):
            return f".{v}"
        return v


class LauncherConfig(BaseSettings):
    """Viewer commands; None selects the platform defaults."""

    model_config = SettingsConfigDict(env_prefix="ODT_CREATOR_LAUNCHER_")

    commands: list[list[str]] | None = None

    @field_validator("commands")
    @classmethod
    def non_empty_commands(cls, v: list[list[str]] | None) -> list[list[str]] | None:
        if v is not None and any(not command for command in v):
            raise ValueError("Viewer commands must not be empty")
        return v


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ODT_CREATOR_")

    paths: PathsConfig = PathsConfig()
    document: DocumentConfig = DocumentConfig()
    launcher: LauncherConfig = LauncherConfig()


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from TOML file, falling back to defaults."""
    path = config_path or CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)

        paths = PathsConfig(**data.get("paths", {}))
        document = DocumentConfig(**data.get("document", {}))
        launcher = LauncherConfig(**data.get("launcher", {}))
        return Settings(paths=paths, document=document, launcher=launcher)

    return Settings()
