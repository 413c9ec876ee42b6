#!/usr/bin/env python3
"""Main CLI entrypoint for grafana-backup."""

import argparse
import sys
from importlib.metadata import version

from grafana_backup.core.client import ExportError, GrafanaClient
from grafana_backup.core.config import BackupConfig, MissingConfigError
from grafana_backup.core.dashboard_exporter import DashboardExporter

# Read version from package metadata (defined in pyproject.toml)
try:
    __version__ = version("grafana-backup")
except Exception:
    __version__ = "unknown"


def backup_dashboards(config: BackupConfig) -> None:
    """
    Replace the output directory with a fresh export of every dashboard.

    Exits with status 1 if the dashboard list cannot be fetched. Failures
    on individual dashboards are reported and skipped.
    """
    client = GrafanaClient(server=config.server, token=config.token)
    exporter = DashboardExporter(client, config.output_dir)

    exporter.clear_output()

    print("Fetching dashboard list...")
    try:
        uids = client.list_dashboards()
    except ExportError as e:
        print(f"failed search API: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Found {len(uids)} dashboards")

    exporter.export_all(uids)


def main():
    """Main CLI entrypoint. All settings come from environment variables."""
    parser = argparse.ArgumentParser(
        prog="grafana-backup",
        description=(
            "Back up Grafana dashboards as JSON files, one directory per folder. "
            "Reads MONITORING_URL, GRAFANA_API_KEY and optionally GRAFANA_BACKUP_DIR."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.parse_args()

    try:
        config = BackupConfig.from_env()
    except MissingConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    backup_dashboards(config)


if __name__ == "__main__":
    main()
