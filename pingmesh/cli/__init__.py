"""Command-line interface for pingmesh."""
