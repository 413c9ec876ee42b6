#!/usr/bin/env python3
"""Export dashboards from Grafana to the local filesystem."""

import json
import shutil
import sys
from collections.abc import Iterable
from pathlib import Path

from grafana_backup.core.client import ExportError, GrafanaClient
from grafana_backup.utils import dashboard_file_name


class DashboardExporter:
    """
    Exports dashboards from Grafana and saves them to disk.

    Each dashboard is written to <output_dir>/<folder title>/<title>_<uid>.json,
    with dashboards outside any folder written directly to output_dir.
    """

    def __init__(self, client: GrafanaClient, output_dir: Path):
        """
        Initialize the dashboard exporter.

        Args:
            client: GrafanaClient instance for API access
            output_dir: Root directory for exported dashboards
        """
        self.client = client
        self.output_dir = Path(output_dir)

    def clear_output(self) -> None:
        """
        Remove the output directory and everything in it, if present.

        A file or symlink at the output path is unlinked rather than followed.
        """
        if self.output_dir.is_symlink() or (self.output_dir.exists() and not self.output_dir.is_dir()):
            self.output_dir.unlink()
        elif self.output_dir.exists():
            shutil.rmtree(self.output_dir)

    def export_dashboard(self, uid: str) -> Path:
        """
        Export a single dashboard.

        The file is only opened once the full document has been fetched, so a
        failed fetch never leaves a partial file behind.

        Args:
            uid: Dashboard UID

        Returns:
            Path of the written file

        Raises:
            ExportError: If either request to Grafana fails
            OSError: If the folder or file cannot be created
        """
        summary = self.client.get_dashboard_summary(uid)

        file_name = dashboard_file_name(summary.title, uid)
        # Split so a leading '/' in the folder title stays under output_dir
        folder = self.output_dir.joinpath(*summary.folder_title.split("/"))
        folder.mkdir(parents=True, exist_ok=True)

        document = self.client.get_dashboard(uid)

        file_path = folder / file_name
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
            f.write("\n")

        return file_path

    def export_all(self, uids: Iterable[str]) -> list[Path]:
        """
        Export every dashboard in order, continuing past failures.

        Failures are reported on stderr, one line per dashboard.

        Args:
            uids: Dashboard UIDs to export

        Returns:
            List of paths to exported dashboard files
        """
        exported_files = []

        for uid in uids:
            try:
                file_path = self.export_dashboard(uid)
            except (ExportError, OSError) as e:
                print(f"failed dashboard {uid}: {e}", file=sys.stderr)
                continue

            exported_files.append(file_path)
            print(f"  Exported: {file_path}")

        return exported_files
