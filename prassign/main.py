"""Prassign config check.

Loads config.yaml (plus ASSIGNMENT_* / LOGGING_* env), applies the logging
settings and reports the effective assignment settings. API layers embed the
service through prassign.app.build_service.
Usage: prassign [--config config.yaml].
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from prassign.config import LoggingConfig, load_config

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names give INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


def setup_logging(config: LoggingConfig) -> None:
    """Configure root logger from logging.level / logging.format."""
    logging.basicConfig(
        level=_resolve_level(config.level),
        format=config.format or DEFAULT_FORMAT,
        force=True,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="prassign",
        description="Prassign - validate reviewer assignment config and show effective settings",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: 0 if the config is valid, 1 otherwise."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (ValidationError, yaml.YAMLError) as e:
        print(f"Invalid config {args.config}: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging)
    logging.getLogger("prassign.main").debug("Loaded config from %s", args.config)
    print(
        "Config OK:",
        f"reviewers_per_pr={config.assignment.reviewers_per_pr}",
        f"seeded={config.assignment.random_seed is not None}",
        f"log_level={config.logging.level}",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
