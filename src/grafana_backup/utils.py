#!/usr/bin/env python3
"""
Shared utility functions for grafana-backup.
"""


def sanitize_file_name(title: str) -> str:
    """
    Replace characters that can't be used in file names with '-'.

    Only '/' and ' ' are replaced; every other character is kept as-is.

    Args:
        title: Dashboard title

    Returns:
        Title with each '/' and space replaced by '-'
    """
    return title.replace("/", "-").replace(" ", "-")


def dashboard_file_name(title: str, uid: str) -> str:
    """Build the output file name for a dashboard."""
    return f"{sanitize_file_name(title)}_{uid}.json"
