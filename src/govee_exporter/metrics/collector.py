"""Prometheus collector rendering every bound device's sink."""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Iterator

from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

from govee_exporter.core.config import METRIC_PREFIX
from govee_exporter.core.exceptions import MetricRegistrationError
from govee_exporter.metrics.sink import MetricSink

logger = logging.getLogger(__name__)

DEVICE_LABELS = ["device_name", "model"]
CHANNEL_LABELS = ["device_name", "model", "channel"]


def _value(value: float | int | None) -> float:
    return math.nan if value is None else float(value)


class DeviceCollector(Collector):
    """Custom collector over a set of MetricSinks.

    Series are built from each sink's snapshot at scrape time, so the
    values of one device are always read together.

    Exposed series:
        <prefix>_temperature_c{device_name, model, channel}
        <prefix>_humidity_percentage{device_name, model, channel}
        <prefix>_battery_percentage{device_name, model}
        <prefix>_advertisements_total{device_name, model}
    """

    def __init__(self, prefix: str = METRIC_PREFIX) -> None:
        self.prefix = prefix
        self._sinks: dict[tuple[str, str], MetricSink] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sinks)

    def add(self, sink: MetricSink) -> None:
        """Start exporting a sink.

        Raises:
            MetricRegistrationError: If a sink with the same identity exists.
        """
        with self._lock:
            if sink.identity in self._sinks:
                raise MetricRegistrationError(
                    sink.device_name, sink.model.value, "duplicate label set"
                )
            self._sinks[sink.identity] = sink
        logger.debug("Exporting metrics for %s", sink)

    def sinks(self) -> list[MetricSink]:
        """Get registered sinks sorted by device name."""
        with self._lock:
            return sorted(self._sinks.values(), key=lambda s: s.identity)

    def _families(self) -> dict[str, Metric]:
        return {
            "temperature": GaugeMetricFamily(
                f"{self.prefix}_temperature_c", "Temperature in Celsius", labels=CHANNEL_LABELS
            ),
            "humidity": GaugeMetricFamily(
                f"{self.prefix}_humidity_percentage", "Humidity percentage", labels=CHANNEL_LABELS
            ),
            "battery": GaugeMetricFamily(
                f"{self.prefix}_battery_percentage", "Battery percentage", labels=DEVICE_LABELS
            ),
            "advertisements": CounterMetricFamily(
                f"{self.prefix}_advertisements",
                "Number of BLE advertisements decoded",
                labels=DEVICE_LABELS,
            ),
        }

    def describe(self) -> Iterator[Metric]:
        yield from self._families().values()

    def collect(self) -> Iterator[Metric]:
        families = self._families()
        for sink in self.sinks():
            snapshot = sink.snapshot()
            labels = list(sink.identity)
            measurement = snapshot.measurement

            channels = measurement.channels if measurement else (None,)
            for index, reading in enumerate(channels):
                channel_labels = [*labels, str(index)]
                families["temperature"].add_metric(
                    channel_labels, _value(reading.temperature_c if reading else None)
                )
                families["humidity"].add_metric(
                    channel_labels, _value(reading.humidity_percentage if reading else None)
                )

            battery = measurement.battery_percentage if measurement else None
            families["battery"].add_metric(labels, _value(battery))
            families["advertisements"].add_metric(labels, snapshot.advertisements)

        yield from families.values()
