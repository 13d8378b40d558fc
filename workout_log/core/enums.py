"""Shared enums for services and API."""

from enum import Enum


class Period(str, Enum):
    """Time window for filtering the workout list."""

    WEEK = "week"  # Last 7 days
    MONTH = "month"  # Last 30 days
    YEAR = "year"  # Since 1 January (UTC)


class PROrder(str, Enum):
    """Ordering of the personal record list."""

    RECENT = "recent"  # Newest first
    NAME = "name"  # Grouped by exercise, newest first within a group
