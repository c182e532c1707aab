"""Tracker module."""

from .tracker import ITracker, Tracker

__all__ = ["ITracker", "Tracker"]
