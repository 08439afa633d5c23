"""HTTP surface: scrape endpoint, call summary and ping responder."""

import logging

from flask import Flask, Response, jsonify
from prometheus_client import CONTENT_TYPE_LATEST

from ..config import PingerConfig
from ..monitoring import CallDirection, CallType, MetricsContext

logger = logging.getLogger(__name__)


class PingerService:
    """
    Flask service exposing an instance's metrics.

    Routes:
    - /metrics: Prometheus scrape
    - /stats: received call summary and boot time
    - /ping: answer a peer ping (counted as a received ping)
    - /healthz: liveness
    """

    def __init__(self, config: PingerConfig, metrics: MetricsContext):
        """
        Initialize the service.

        Args:
            config: Instance configuration
            metrics: Registered metrics context shared with the rest of the daemon
        """
        self.config = config
        self.metrics = metrics
        self.app = Flask(__name__)
        self._setup_routes()

        logger.info(f"Pinger service initialized for instance: {config.hostname}")

    def _setup_routes(self):
        """Set up Flask routes."""

        @self.app.route('/healthz', methods=['GET'])
        def healthz():
            """Liveness endpoint."""
            return jsonify({
                "status": "healthy",
                "instance": self.metrics.instance,
                "uptime_seconds": round(self.metrics.get_uptime(), 3)
            })

        @self.app.route('/ping', methods=['GET'])
        def ping():
            """Answer a ping from a peer."""
            self.metrics.record_call(CallDirection.RECEIVED, CallType.PING)
            return jsonify(self.metrics.get_stats().model_dump(mode='json'))

        @self.app.route('/stats', methods=['GET'])
        def stats():
            """Return the call summary without counting a call."""
            return jsonify(self.metrics.get_stats().model_dump(mode='json'))

        @self.app.route('/metrics', methods=['GET'])
        def metrics():
            """Prometheus scrape endpoint."""
            return Response(
                self.metrics.to_prometheus(),
                content_type=CONTENT_TYPE_LATEST
            )

    def run(self, **kwargs):
        """
        Run the service on the configured address.

        Args:
            **kwargs: Additional arguments for Flask app.run()
        """
        logger.info(f"Starting pinger service on {self.config.host}:{self.config.port}")
        self.app.run(host=self.config.host, port=self.config.port, threaded=True, **kwargs)
