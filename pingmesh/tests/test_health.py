"""Tests for node health classification."""

from pingmesh.monitoring import HealthStatus, count_node_health


def test_count_node_health():
    """Peers split into healthy and unhealthy by their last probe."""
    results = {"node-a": True, "node-b": False, "node-c": True, "node-d": False, "node-e": True}
    assert count_node_health(results) == (3, 2)


def test_count_node_health_empty():
    assert count_node_health({}) == (0, 0)


def test_count_feeds_health_gauge(metrics):
    """Counts recorded on the gauge show up under each status label."""
    metrics.record_node_health(*count_node_health({"node-b": True, "node-c": False}))

    for status, expected in ((HealthStatus.HEALTHY, 1), (HealthStatus.UNHEALTHY, 1)):
        value = metrics.registry.get_sample_value(
            "pingmesh_nodes_health_total",
            {"pingmesh_instance": "node-a", "status": status.value}
        )
        assert value == expected
