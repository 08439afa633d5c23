"""Tests for data models and configuration."""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from pingmesh.config import PingerConfig
from pingmesh.models import CallStats, PingResults


def test_call_stats_defaults():
    """Call stats start at zero."""
    stats = CallStats()
    assert stats.ping == 0
    assert stats.check == 0
    assert stats.check_all == 0


def test_call_stats_reject_negative_counts():
    """Counts can never be negative."""
    with pytest.raises(ValidationError):
        CallStats(ping=-1)


def test_ping_results_serialization():
    """Summary serializes to the JSON shape served on /stats."""
    boot = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    results = PingResults(boot_time=boot, received=CallStats(ping=3, check=1, check_all=2))

    data = results.model_dump(mode='json')
    assert data["received"] == {"ping": 3, "check": 1, "check_all": 2}
    assert data["boot_time"].startswith("2026-01-02T03:04:05")

    assert PingResults(**data) == results


def test_config_defaults_to_machine_hostname(monkeypatch):
    """The reporting instance falls back to the machine hostname."""
    monkeypatch.setattr("socket.gethostname", lambda: "worker-7")
    config = PingerConfig()

    assert config.hostname == "worker-7"
    assert config.port == 8080
    assert config.error_types is None


def test_config_validation():
    """Empty hostnames and impossible ports are refused."""
    with pytest.raises(ValidationError):
        PingerConfig(hostname="")
    with pytest.raises(ValidationError):
        PingerConfig(hostname="node-a", port=70000)
