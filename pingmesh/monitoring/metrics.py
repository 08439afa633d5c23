"""Prometheus metrics and call statistics for a pingmesh instance."""

import logging
import time
from datetime import datetime, timezone
from typing import Callable, List, Optional

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, generate_latest

from ..config import PingerConfig
from ..models import CallStats, PingResults
from .health import HealthStatus
from .tally import CallDirection, CallTally, CallType
from .timer import CallTimer


logger = logging.getLogger(__name__)

INSTANCE_LABEL = "pingmesh_instance"

RESPONSE_TIME_BUCKETS = (.005, .01, .025, .05, .1, .25, .5, 1, 2.5, 5, 10, 30)


class ErrorType(str):
    """Error types reported by the daemon itself."""
    PING = "ping"
    CHECK = "check"
    CHECK_ALL = "check_all"
    KUBERNETES_API = "kubernetes_api"
    OTHER = "other"  # Used for types outside a configured allow-list


class MetricsRegistrationError(RuntimeError):
    """A metric could not be registered, usually because its name is taken."""


class MetricsContext:
    """
    Process-wide metrics for one reporting instance.

    Owns the Prometheus registry, the in-process call tally and the boot
    time. Build one in the entry point with ``create()`` and hand it to
    everything that reports; tests build their own.
    """

    def __init__(
        self,
        config: PingerConfig,
        registry: Optional[CollectorRegistry] = None,
        clock: Callable[[], float] = time.perf_counter
    ):
        """
        Initialize metrics context.

        Metrics are not visible to the registry until ``register()``.

        Args:
            config: Instance configuration (supplies the reporting hostname)
            registry: Registry to register into (a fresh one if None)
            clock: Clock used by call timers
        """
        self.config = config
        self.instance = config.hostname
        self.registry = registry if registry is not None else CollectorRegistry()
        self.tally = CallTally()
        self._clock = clock
        self._allowed_errors = set(config.error_types) if config.error_types is not None else None

        self.boot_time = datetime.now(timezone.utc)
        self._boot_monotonic = time.monotonic()

        self.calls_counter = Counter(
            "pingmesh_stats_total",
            "Statistics of calls made in pingmesh instances",
            [INSTANCE_LABEL, "group", "action"],
            registry=None
        )
        self.nodes_health_gauge = Gauge(
            "pingmesh_nodes_health_total",
            "Number of nodes seen as healthy/unhealthy from this instance's POV",
            [INSTANCE_LABEL, "status"],
            registry=None
        )
        self.peers_response_time = Histogram(
            "pingmesh_peers_response_time_s",
            "Histogram of response times from other hosts, when making peer calls",
            [INSTANCE_LABEL, "call_type", "host_ip", "pod_ip"],
            buckets=RESPONSE_TIME_BUCKETS,
            registry=None
        )
        self.kubernetes_response_time = Histogram(
            "pingmesh_kube_master_response_time_s",
            "Histogram of response times from kubernetes API server, when listing other instances",
            [INSTANCE_LABEL],
            buckets=RESPONSE_TIME_BUCKETS,
            registry=None
        )
        self.errors_counter = Counter(
            "pingmesh_errors_total",
            "Statistics of errors per instance",
            [INSTANCE_LABEL, "type"],
            registry=None
        )

    @classmethod
    def create(
        cls,
        config: PingerConfig,
        registry: Optional[CollectorRegistry] = None
    ) -> "MetricsContext":
        """Build a context and register its metrics."""
        context = cls(config, registry=registry)
        context.register()
        return context

    @property
    def collectors(self) -> List:
        return [
            self.calls_counter,
            self.nodes_health_gauge,
            self.peers_response_time,
            self.kubernetes_response_time,
            self.errors_counter,
        ]

    def register(self):
        """
        Register every metric with the registry.

        Must be called once. On a name collision the metrics registered so
        far are removed again and MetricsRegistrationError is raised;
        startup should not continue.
        """
        registered = []
        for collector in self.collectors:
            try:
                self.registry.register(collector)
            except ValueError as e:
                logger.critical(f"Metrics registration failed: {e}")
                for done in registered:
                    self.registry.unregister(done)
                raise MetricsRegistrationError(str(e)) from e
            registered.append(collector)

        logger.info("Metrics setup - see /metrics")

    def record_call(self, direction: CallDirection, call_type: CallType):
        """
        Count a call received or made.

        Updates the call tally and the call counter together.

        Raises:
            ValueError: direction or call_type is not a known value
        """
        direction = CallDirection(direction)
        call_type = CallType(call_type)

        self.tally.increment(direction, call_type)
        self.calls_counter.labels(self.instance, direction.value, call_type.value).inc()

    def record_node_health(self, healthy: float, unhealthy: float):
        """Set the number of healthy and unhealthy nodes seen from here."""
        self.nodes_health_gauge.labels(self.instance, HealthStatus.HEALTHY.value).set(healthy)
        self.nodes_health_gauge.labels(self.instance, HealthStatus.UNHEALTHY.value).set(unhealthy)

    def record_error(self, error_type: str):
        """
        Count an error.

        Error types become label values, so callers should stick to a
        small fixed set such as ``ErrorType``.
        """
        if self._allowed_errors is not None and error_type not in self._allowed_errors:
            logger.warning(f"Unlisted error type '{error_type}' recorded as '{ErrorType.OTHER}'")
            error_type = ErrorType.OTHER

        self.errors_counter.labels(self.instance, error_type).inc()

    def peer_call_timer(self, call_type: CallType, host_ip: str, pod_ip: str) -> CallTimer:
        """Start timing a call to a peer."""
        call_type = CallType(call_type)
        histogram = self.peers_response_time.labels(self.instance, call_type.value, host_ip, pod_ip)
        return CallTimer(histogram, clock=self._clock)

    def kubernetes_call_timer(self) -> CallTimer:
        """Start timing a call to the Kubernetes API server."""
        histogram = self.kubernetes_response_time.labels(self.instance)
        return CallTimer(histogram, clock=self._clock)

    def get_stats(self) -> PingResults:
        """Summary of received calls and the boot time."""
        received = CallDirection.RECEIVED
        return PingResults(
            boot_time=self.boot_time,
            received=CallStats(
                ping=self.tally.get(received, CallType.PING),
                check=self.tally.get(received, CallType.CHECK),
                check_all=self.tally.get(received, CallType.CHECK_ALL),
            )
        )

    def get_uptime(self) -> float:
        """Get uptime in seconds."""
        return time.monotonic() - self._boot_monotonic

    def to_prometheus(self) -> bytes:
        """
        Export metrics in Prometheus format.

        Returns:
            Prometheus text exposition of the registry
        """
        return generate_latest(self.registry)
