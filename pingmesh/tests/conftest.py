"""Shared fixtures for pingmesh tests."""

import pytest
from prometheus_client import CollectorRegistry

from pingmesh.config import PingerConfig
from pingmesh.monitoring import MetricsContext


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def advance(self, seconds: float):
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def config():
    return PingerConfig(hostname="node-a")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def metrics(config, clock):
    """Registered metrics context on its own registry."""
    context = MetricsContext(config, registry=CollectorRegistry(), clock=clock)
    context.register()
    return context
