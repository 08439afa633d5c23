"""Peer node health classification."""

from enum import Enum
from typing import Mapping, Tuple


class HealthStatus(str, Enum):
    """Node health status, used as the ``status`` label value."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


def count_node_health(results: Mapping[str, bool]) -> Tuple[int, int]:
    """
    Reduce the latest probe outcome per peer to healthy/unhealthy counts.

    Args:
        results: Peer identifier -> whether its last probe succeeded

    Returns:
        (healthy, unhealthy)
    """
    healthy = sum(1 for ok in results.values() if ok)
    return healthy, len(results) - healthy
