"""Pytest configuration and shared fixtures."""

import json
from unittest.mock import Mock

import pytest

from grafana_backup.core.client import DashboardSummary, GrafanaClient


def make_response(status_code: int = 200, body=None, text: str | None = None, reason: str = "OK") -> Mock:
    """
    Build a fake requests.Response.

    Args:
        status_code: HTTP status code
        body: Value returned by .json() (also serialized into .text)
        text: Raw body text; when given, .json() parses it and may raise
        reason: HTTP reason phrase
    """
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    if text is None:
        text = json.dumps(body)
    response.text = text
    response.json.side_effect = lambda: json.loads(text)
    return response


class FakeGrafana:
    """
    In-memory stand-in for the dashboard endpoints of a GrafanaClient.

    Records every call so tests can count summary and raw fetches per UID.
    """

    def __init__(self, dashboards: dict[str, dict], failures: dict[tuple[str, str], Exception] | None = None):
        self.dashboards = dashboards
        self.failures = failures or {}
        self.calls = []

    def get_dashboard_summary(self, uid):
        self.calls.append(("summary", uid))
        if ("summary", uid) in self.failures:
            raise self.failures[("summary", uid)]
        data = self.dashboards[uid]
        return DashboardSummary(data["dashboard"]["title"], data.get("meta", {}).get("folderTitle", ""))

    def get_dashboard(self, uid):
        self.calls.append(("raw", uid))
        if ("raw", uid) in self.failures:
            raise self.failures[("raw", uid)]
        return self.dashboards[uid]


@pytest.fixture
def client():
    """A GrafanaClient pointed at a fake server."""
    return GrafanaClient("https://grafana.example.com/", "secret-token")


@pytest.fixture
def sample_dashboard():
    """A dashboard detail response in the shape Grafana returns."""
    return {
        "dashboard": {
            "uid": "abc",
            "title": "Sales/Q1 Report",
            "panels": [{"id": 1, "type": "graph", "title": "Revenue €"}],
            "templating": {"list": []},
            "version": 7,
        },
        "meta": {"folderTitle": "Finance", "folderUid": "fin", "canEdit": True, "expires": None},
    }
