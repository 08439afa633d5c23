"""Metrics and call statistics for pingmesh instances."""

from .metrics import MetricsContext, MetricsRegistrationError, ErrorType
from .health import HealthStatus, count_node_health
from .tally import CallDirection, CallTally, CallType
from .timer import CallTimer

__all__ = [
    "MetricsContext",
    "MetricsRegistrationError",
    "ErrorType",
    "HealthStatus",
    "count_node_health",
    "CallDirection",
    "CallTally",
    "CallType",
    "CallTimer",
]
