"""Prometheus metrics boundary."""

from govee_exporter.metrics.collector import DeviceCollector
from govee_exporter.metrics.server import create_registry, start_metrics_server
from govee_exporter.metrics.sink import MetricSink, SinkSnapshot

__all__ = [
    "MetricSink",
    "SinkSnapshot",
    "DeviceCollector",
    "create_registry",
    "start_metrics_server",
]
