"""OpenTelemetry instruments for the relay."""

from typing import Optional

from opentelemetry import metrics
from opentelemetry.metrics import Meter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import ConsoleMetricExporter, PeriodicExportingMetricReader


_meter_provider_initialized = False


def init_metrics() -> None:
    """Install a console-exporting meter provider once per process."""
    global _meter_provider_initialized
    if _meter_provider_initialized:
        return
    reader = PeriodicExportingMetricReader(ConsoleMetricExporter())
    metrics.set_meter_provider(MeterProvider(metric_readers=[reader]))
    _meter_provider_initialized = True


class RelayMetrics:
    """
    Request counter and duration histogram for relay invocations.

    Both instruments carry the HTTP method and the relay's status code, so
    405s, configuration failures and forwarded queries can be told apart.
    """

    def __init__(self, meter: Optional[Meter] = None):
        """
        Args:
            meter: Meter to create instruments on (the global one if None)
        """
        if meter is None:
            init_metrics()
            meter = metrics.get_meter("shopify_catalog_relay")
        self.requests = meter.create_counter(
            name="catalog.relay.requests",
            unit="1",
            description="Relay invocations by method and status code",
        )
        self.duration = meter.create_histogram(
            name="catalog.relay.request.duration",
            unit="ms",
            description="Duration of relay requests, upstream call included",
        )

    def record(self, method: str, status_code: int, duration_ms: float) -> None:
        attributes = {"http.method": method, "http.status_code": status_code}
        self.requests.add(1, attributes=attributes)
        self.duration.record(duration_ms, attributes=attributes)
