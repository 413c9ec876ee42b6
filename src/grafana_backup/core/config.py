#!/usr/bin/env python3
"""Configuration for grafana-backup, read from environment variables."""

import os
from collections.abc import Mapping
from pathlib import Path

SERVER_ENV = "MONITORING_URL"
TOKEN_ENV = "GRAFANA_API_KEY"
OUTPUT_DIR_ENV = "GRAFANA_BACKUP_DIR"
DEFAULT_OUTPUT_DIR = Path("./dashboard")


class MissingConfigError(Exception):
    """A required environment variable is not set."""

    def __init__(self, key: str):
        super().__init__(f"required environment variable {key} is not set")
        self.key = key


def get_required_env(key: str, environ: Mapping[str, str] | None = None) -> str:
    """
    Get a required environment variable.

    Args:
        key: Variable name
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        The variable's value

    Raises:
        MissingConfigError: If the variable is unset or empty
    """
    if environ is None:
        environ = os.environ
    value = environ.get(key, "")
    if not value:
        raise MissingConfigError(key)
    return value


class BackupConfig:
    """Settings for one backup run."""

    def __init__(self, server: str, token: str, output_dir: Path = DEFAULT_OUTPUT_DIR):
        self.server = server.rstrip("/")
        self.token = token
        self.output_dir = Path(output_dir)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BackupConfig":
        """
        Load config from the environment.

        MONITORING_URL and GRAFANA_API_KEY are required. GRAFANA_BACKUP_DIR
        optionally overrides the output directory.

        Raises:
            MissingConfigError: If a required variable is missing
        """
        if environ is None:
            environ = os.environ
        server = get_required_env(SERVER_ENV, environ)
        token = get_required_env(TOKEN_ENV, environ)
        output_dir = environ.get(OUTPUT_DIR_ENV) or DEFAULT_OUTPUT_DIR
        return cls(server, token, Path(output_dir))

    def __repr__(self):
        return f"BackupConfig(server={self.server!r}, output_dir={str(self.output_dir)!r})"
