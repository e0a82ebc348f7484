"""Per-device last-known-value store.

A MetricSink is written by the advertisement router and read by the
prometheus collector from the HTTP server thread. Values live in one
immutable snapshot that is swapped under a lock, so a scrape sees
either the previous measurement set or the new one, never a mix.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from govee_exporter.decoders.models import DeviceModel, Measurement

if TYPE_CHECKING:
    from govee_exporter.metrics.collector import DeviceCollector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SinkSnapshot:
    """Consistent view of a sink at one point in time."""

    measurement: Measurement | None = None
    advertisements: int = 0


class MetricSink:
    """Last observed measurement and advertisement count for one device.

    Example:
        >>> sink = MetricSink("GVH5075_1A2B", DeviceModel.GVH5075)
        >>> sink.update(measurement)
        >>> sink.advertisements
        1
    """

    def __init__(self, device_name: str, model: DeviceModel) -> None:
        self.device_name = device_name
        self.model = model
        self._lock = threading.Lock()
        self._snapshot = SinkSnapshot()

    @classmethod
    def register(
        cls, device_name: str, model: DeviceModel, collector: DeviceCollector
    ) -> MetricSink:
        """Create a sink and expose it through a collector.

        Raises:
            MetricRegistrationError: If the collector already exports
                a sink with the same name and model.
        """
        sink = cls(device_name, model)
        collector.add(sink)
        return sink

    @property
    def identity(self) -> tuple[str, str]:
        """Label values that identify this sink's series."""
        return (self.device_name, self.model.value)

    @property
    def measurement(self) -> Measurement | None:
        return self.snapshot().measurement

    @property
    def advertisements(self) -> int:
        return self.snapshot().advertisements

    def snapshot(self) -> SinkSnapshot:
        """Get the current values as one consistent set."""
        with self._lock:
            return self._snapshot

    def update(self, measurement: Measurement) -> None:
        """Replace the last-known values and count the advertisement.

        Args:
            measurement: Successfully decoded measurement for this device.

        Raises:
            ValueError: If the measurement belongs to another model.
        """
        if measurement.model != self.model:
            raise ValueError(
                f"{self.device_name} is a {self.model.value}, got {measurement.model.value} data"
            )
        with self._lock:
            self._snapshot = SinkSnapshot(
                measurement=measurement,
                advertisements=self._snapshot.advertisements + 1,
            )

    def __repr__(self) -> str:
        return f"MetricSink({self.device_name!r}, {self.model.value})"
