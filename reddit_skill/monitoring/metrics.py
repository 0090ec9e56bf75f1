"""Prometheus metrics for monitoring the Reddit voice skill."""

import logging

from prometheus_client import Counter, Histogram, start_http_server

logger = logging.getLogger(__name__)

# Define metrics
REQUESTS_HANDLED = Counter(
    "reddit_skill_requests_total",
    "Number of skill requests handled",
    ["request_type"],
)

INTENTS_HANDLED = Counter(
    "reddit_skill_intents_total",
    "Number of intents dispatched",
    ["intent"],
)

FETCH_OPERATIONS = Counter(
    "reddit_skill_fetch_operations_total",
    "Number of Reddit fetches by outcome",
    ["outcome"],
)

API_ERRORS = Counter(
    "reddit_skill_api_errors_total",
    "Number of Reddit API errors encountered",
    ["error_type"],
)

UNSUPPORTED_TOPICS = Counter(
    "reddit_skill_unsupported_topics_total",
    "Number of requests for topics outside the allow-list",
)

REQUEST_DURATION = Histogram(
    "reddit_skill_fetch_duration_seconds",
    "Duration of Reddit fetches in seconds",
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)


class PrometheusExporter:
    """Prometheus metrics exporter for the Reddit voice skill."""

    def __init__(self, port: int = 8000):
        """
        Initialize the Prometheus exporter.

        Args:
            port: Port to expose metrics on
        """
        self.port = port
        self.server_started = False

    def start_server(self) -> None:
        """Start the Prometheus metrics server."""
        if not self.server_started:
            try:
                start_http_server(self.port)
                self.server_started = True
                logger.info(f"Started Prometheus metrics server on port {self.port}")
            except OSError as e:
                logger.error(f"Failed to start Prometheus metrics server: {str(e)}")

    def record_request(self, request_type: str) -> None:
        """Record an inbound request, e.g. 'LaunchRequest'."""
        REQUESTS_HANDLED.labels(request_type=request_type).inc()

    def record_intent(self, intent: str) -> None:
        """Record a dispatched intent."""
        INTENTS_HANDLED.labels(intent=intent).inc()

    def record_fetch(self, outcome: str) -> None:
        """
        Record a fetch outcome.

        Args:
            outcome: 'success' or the error type of the failure
        """
        FETCH_OPERATIONS.labels(outcome=outcome).inc()

    def record_api_error(self, error_type: str) -> None:
        """
        Record an API error.

        Args:
            error_type: Type of API error (e.g. 'transport', 'upstream', 'malformed')
        """
        API_ERRORS.labels(error_type=error_type).inc()

    def record_unsupported_topic(self) -> None:
        UNSUPPORTED_TOPICS.inc()

    def time_request(self):
        """
        Create a context manager for timing Reddit fetches.

        Returns:
            Histogram timer that observes the elapsed seconds on exit
        """
        return REQUEST_DURATION.time()
