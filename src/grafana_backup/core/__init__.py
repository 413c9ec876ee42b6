"""Core library classes for grafana-backup."""

from .client import (
    DashboardSummary,
    DecodeError,
    ExportError,
    GrafanaClient,
    HTTPStatusError,
    RequestError,
    RequestTimeoutError,
)
from .config import BackupConfig, MissingConfigError
from .dashboard_exporter import DashboardExporter

__all__ = [
    "BackupConfig",
    "DashboardExporter",
    "DashboardSummary",
    "DecodeError",
    "ExportError",
    "GrafanaClient",
    "HTTPStatusError",
    "MissingConfigError",
    "RequestError",
    "RequestTimeoutError",
]
