"""Data models and schemas for pingmesh."""

from .stats import CallStats, PingResults

__all__ = [
    "CallStats",
    "PingResults",
]
