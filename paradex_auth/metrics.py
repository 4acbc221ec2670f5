"""
Prometheus metrics for the onboarding and auth flows.
"""

import logging
from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, REGISTRY

logger = logging.getLogger(__name__)


class Metrics:
    """
    Prometheus metrics collector.

    Tracks:
    - Flow outcomes (onboarding/auth, by status)
    - Flow latency
    """

    def __init__(self, enabled: bool = True, registry: Optional[CollectorRegistry] = None):
        """
        Initialize metrics.

        Args:
            enabled: Enable metrics collection
            registry: Collector registry (default: global registry)
        """
        self.enabled = enabled

        if not self.enabled:
            return

        registry = registry if registry is not None else REGISTRY

        self.requests = Counter(
            'paradex_auth_requests_total',
            'Total onboarding/auth requests',
            ['flow', 'status'],
            registry=registry
        )

        self.latency = Histogram(
            'paradex_auth_latency_seconds',
            'Onboarding/auth request latency',
            ['flow'],
            registry=registry
        )

    def track_request(self, flow: str, status: str) -> None:
        """Record flow outcome."""
        if self.enabled:
            self.requests.labels(flow=flow, status=status).inc()

    def track_latency(self, flow: str, duration: float) -> None:
        """Record flow latency."""
        if self.enabled:
            self.latency.labels(flow=flow).observe(duration)


_metrics: Optional[Metrics] = None


def get_metrics(enabled: bool = False, registry: Optional[CollectorRegistry] = None) -> Metrics:
    """
    Get or create the process-wide metrics instance.

    A disabled instance is replaced the first time a caller asks for
    enabled metrics; an enabled one is never downgraded.
    """
    global _metrics
    if _metrics is None or (enabled and not _metrics.enabled):
        _metrics = Metrics(enabled=enabled, registry=registry)
        logger.debug(f"Metrics initialized (enabled={enabled})")
    return _metrics
