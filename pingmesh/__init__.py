"""pingmesh - instrumentation core of a mesh health-checking daemon."""

__version__ = "0.1.0"
