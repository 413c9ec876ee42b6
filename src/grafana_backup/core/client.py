#!/usr/bin/env python3
"""Grafana API client."""

from typing import NamedTuple

import requests

DEFAULT_TIMEOUT = 30
MAX_BODY_IN_MESSAGE = 200


class ExportError(Exception):
    """Base class for errors raised while talking to Grafana."""


class RequestError(ExportError):
    """The request could not be sent or no response was received."""


class RequestTimeoutError(RequestError):
    """The request did not complete within the client timeout."""


class HTTPStatusError(ExportError):
    """Grafana answered with a status other than 200."""

    def __init__(self, status: str, body: str):
        # Keep the message on one line; the full body stays in .body
        summary = " ".join(body.split())
        if len(summary) > MAX_BODY_IN_MESSAGE:
            summary = summary[:MAX_BODY_IN_MESSAGE] + "..."
        super().__init__(f"request failed: {status}: {summary}")
        self.status = status
        self.body = body


class DecodeError(ExportError):
    """The response body is not JSON of the expected shape."""


class DashboardSummary(NamedTuple):
    """The two dashboard fields needed to place it on disk."""

    title: str
    folder_title: str


def _string_field(data: dict, key: str, where: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise DecodeError(f"expected string for {where}.{key}, got {type(value).__name__}")
    return value


def _object_field(data: dict, key: str) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"expected object for {key}, got {type(value).__name__}")
    return value


class GrafanaClient:
    """Client for reading dashboards from the Grafana API."""

    def __init__(self, server: str, token: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize Grafana client.

        Args:
            server: Grafana server URL
            token: API token sent as a bearer token
            timeout: Seconds to wait for each request before giving up
        """
        self.server = server.rstrip("/")
        self.timeout = timeout
        self._headers = {"Authorization": f"Bearer {token}"}

    def fetch_json(self, path: str):
        """
        GET a path on the server and decode the JSON body.

        Args:
            path: API path starting with '/', including any query string

        Returns:
            The decoded JSON value

        Raises:
            RequestTimeoutError: If the request exceeds the timeout
            RequestError: If the request could not be completed
            HTTPStatusError: If the response status is not 200
            DecodeError: If the body is not valid JSON
        """
        url = f"{self.server}{path}"
        try:
            response = requests.get(url, headers=self._headers, timeout=self.timeout)
        except requests.Timeout as e:
            raise RequestTimeoutError(f"request to {url} timed out: {e}") from e
        except requests.RequestException as e:
            raise RequestError(f"request to {url} failed: {e}") from e

        if response.status_code != 200:
            raise HTTPStatusError(f"{response.status_code} {response.reason}", response.text)

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"invalid JSON from {url}: {e}") from e

    def list_dashboards(self) -> list[str]:
        """
        Fetch the UIDs of all dashboards.

        Only the first page of search results is read.

        Returns:
            Dashboard UIDs in the order Grafana returned them
        """
        results = self.fetch_json("/api/search?type=dash-db")
        if not isinstance(results, list):
            raise DecodeError(f"expected list of search results, got {type(results).__name__}")

        uids = []
        for item in results:
            if not isinstance(item, dict):
                raise DecodeError(f"expected search result object, got {type(item).__name__}")
            uids.append(_string_field(item, "uid", "search result"))
        return uids

    def get_dashboard_summary(self, uid: str) -> DashboardSummary:
        """
        Fetch a dashboard's title and folder title.

        Args:
            uid: Dashboard UID

        Returns:
            DashboardSummary; folder_title is empty for dashboards at the root
        """
        data = self.fetch_json(f"/api/dashboards/uid/{uid}")
        if not isinstance(data, dict):
            raise DecodeError(f"expected dashboard object, got {type(data).__name__}")

        dashboard = _object_field(data, "dashboard")
        meta = _object_field(data, "meta")
        return DashboardSummary(
            title=_string_field(dashboard, "title", "dashboard"),
            folder_title=_string_field(meta, "folderTitle", "meta"),
        )

    def get_dashboard(self, uid: str) -> dict:
        """
        Fetch the full dashboard document by UID.

        Args:
            uid: Dashboard UID

        Returns:
            The whole response, including metadata and dashboard JSON
        """
        data = self.fetch_json(f"/api/dashboards/uid/{uid}")
        if not isinstance(data, dict):
            raise DecodeError(f"expected dashboard object, got {type(data).__name__}")
        return data
