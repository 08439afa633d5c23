"""Tests for the HTTP surface."""

import pytest
from pingmesh.server import PingerService


@pytest.fixture
def client(config, metrics):
    service = PingerService(config, metrics)
    service.app.testing = True
    return service.app.test_client()


def test_healthz(client):
    response = client.get('/healthz')

    assert response.status_code == 200
    assert response.get_json()["status"] == "healthy"
    assert response.get_json()["instance"] == "node-a"


def test_ping_counts_received_ping(client, metrics):
    """Each ping is counted and the summary is returned."""
    client.get('/ping')
    response = client.get('/ping')

    assert response.status_code == 200
    assert response.get_json()["received"]["ping"] == 2
    assert metrics.registry.get_sample_value(
        "pingmesh_stats_total",
        {"pingmesh_instance": "node-a", "group": "received", "action": "ping"}
    ) == 2


def test_stats_does_not_count(client, metrics):
    """Reading the summary is side-effect free."""
    client.get('/stats')
    response = client.get('/stats')
    data = response.get_json()

    assert data["received"] == {"ping": 0, "check": 0, "check_all": 0}
    assert data["boot_time"] == metrics.get_stats().model_dump(mode='json')["boot_time"]


def test_metrics_scrape(client, metrics):
    """The scrape endpoint serves the Prometheus text format."""
    metrics.record_error("dns_timeout")
    response = client.get('/metrics')

    assert response.status_code == 200
    assert response.content_type.startswith("text/plain")
    body = response.get_data(as_text=True)
    assert 'pingmesh_errors_total{pingmesh_instance="node-a",type="dns_timeout"} 1.0' in body
