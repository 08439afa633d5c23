"""HTTP server for pingmesh."""

from .app import PingerService

__all__ = ["PingerService"]
