"""Configuration loading from YAML and environment.

Every section is a pydantic-settings model, so each value can also be set
through its environment variable (ASSIGNMENT_*, LOGGING_*). Values in the
YAML file may reference the environment as ${VAR} or $VAR.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssignmentConfig(BaseSettings):
    """Reviewer assignment settings."""

    model_config = SettingsConfigDict(env_prefix="ASSIGNMENT_", extra="ignore")

    reviewers_per_pr: int = Field(default=2, ge=0, le=10, description="Reviewers picked for a new pull request")
    # Fixed seed makes selection reproducible; leave unset outside of tests and demos
    random_seed: int | None = Field(default=None, description="Seed for the selection randomness source")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    assignment: AssignmentConfig = Field(default_factory=AssignmentConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _substitute_env(value: Any, env: dict[str, str]) -> Any:
    """Replace ${VAR} and $VAR in strings with values from env."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v, env) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file gives defaults (still overridable from env). Raises
    pydantic ValidationError on invalid values and yaml.YAMLError on a
    malformed file.
    """
    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    raw = _substitute_env(raw, dict(os.environ))

    assignment = AssignmentConfig(**(raw.get("assignment") or {}))
    logging = LoggingConfig(**(raw.get("logging") or {}))
    return AppConfig(assignment=assignment, logging=logging)
