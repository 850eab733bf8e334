"""Aggregate application use cases."""

from . import activities, participants

__all__ = [
    "activities",
    "participants",
]
