"""Workout log: set recording, personal record detection and exercise statistics."""

__version__ = "0.1.0"
