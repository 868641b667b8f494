"""Helpers reading the few PointCloud2 fields this package cares about."""

from __future__ import annotations

from typing import Any

POINT_COUNT_FORMAT = "Message received, number of points is: {count}"


def point_count(msg: Any) -> int:
    """Return the number of points of an organized or unorganized cloud (width * height)."""
    return int(msg.width) * int(msg.height)


def format_point_count(count: int) -> str:
    """Return the log line reporting ``count`` received points."""
    return POINT_COUNT_FORMAT.format(count=count)
