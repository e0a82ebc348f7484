"""HTTP endpoint serving the collected metrics for scraping."""

from __future__ import annotations

import logging
from typing import Any

from prometheus_client import CollectorRegistry, start_http_server

from govee_exporter.core.config import ExporterConfig
from govee_exporter.core.exceptions import ExporterError
from govee_exporter.metrics.collector import DeviceCollector

logger = logging.getLogger(__name__)


def create_registry(collector: DeviceCollector) -> CollectorRegistry:
    """Build a dedicated registry exposing only the device collector.

    Args:
        collector: Collector over all bound devices.

    Returns:
        Registry to pass to the HTTP server.
    """
    registry = CollectorRegistry(auto_describe=True)
    registry.register(collector)
    return registry


def start_metrics_server(config: ExporterConfig, registry: CollectorRegistry) -> Any:
    """Start the prometheus HTTP server on a daemon thread.

    Args:
        config: Exporter configuration with the listen endpoint.
        registry: Registry to serve.

    Returns:
        Whatever ``start_http_server`` returns (server and thread on
        current prometheus_client releases).

    Raises:
        ExporterError: If the endpoint cannot be bound.
    """
    try:
        server = start_http_server(
            config.listen_port, addr=config.listen_address, registry=registry
        )
    except OSError as e:
        raise ExporterError(
            "Failed to start metrics server", f"{config.listen_endpoint}: {e}"
        ) from e

    logger.info("Serving metrics on http://%s/metrics", config.listen_endpoint)
    return server
