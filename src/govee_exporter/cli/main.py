"""CLI entry point for the Govee BLE exporter."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from govee_exporter.core.config import DEFAULT_LISTEN_ADDRESS, DEFAULT_LISTEN_PORT, ExporterConfig
from govee_exporter.core.exceptions import ExporterError
from govee_exporter.decoders.registry import DEFAULT_REGISTRY, ModelRegistry
from govee_exporter.devices.table import DeviceTable
from govee_exporter.metrics.collector import DeviceCollector
from govee_exporter.metrics.server import create_registry, start_metrics_server
from govee_exporter.scanner.ble import BleakEventSource
from govee_exporter.scanner.router import AdvertisementRouter, RouterStats
from govee_exporter.ui.display import display_devices, display_models, print_banner, print_error

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Govee Exporter - Publish Govee BLE sensor readings as Prometheus metrics"
    )
    parser.add_argument(
        "-a",
        "--address",
        type=str,
        default=DEFAULT_LISTEN_ADDRESS,
        help=f"Metrics listen address (default: {DEFAULT_LISTEN_ADDRESS})",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=DEFAULT_LISTEN_PORT,
        help=f"Metrics listen port (default: {DEFAULT_LISTEN_PORT})",
    )
    parser.add_argument(
        "--adapter",
        type=str,
        default=None,
        help="Bluetooth adapter, e.g. hci0 (default: system default)",
    )
    parser.add_argument(
        "-d",
        "--duration",
        type=float,
        default=None,
        help="Scan duration in seconds (default: indefinite)",
    )
    parser.add_argument(
        "--no-name-filter",
        action="store_true",
        help="Bind devices by manufacturer id alone, ignoring their names",
    )
    parser.add_argument(
        "--list-models",
        action="store_true",
        help="Show supported device models and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


async def run_exporter(
    config: ExporterConfig,
    table: DeviceTable,
    source: BleakEventSource | None = None,
) -> RouterStats:
    """Scan and route advertisements until the duration elapses.

    Args:
        config: Exporter configuration.
        table: Device table receiving bindings.
        source: Event source; a BleakEventSource on the configured adapter by default.

    Returns:
        Router counters for the session.
    """
    source = source or BleakEventSource(adapter=config.adapter)
    router = AdvertisementRouter(table, source)

    async with source:
        try:
            await asyncio.wait_for(router.run(source.events()), config.scan_duration_seconds)
        except asyncio.TimeoutError:
            logger.info("Scan duration of %.0fs elapsed", config.scan_duration_seconds)

    return router.stats


def main() -> None:
    """Govee exporter CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()
    setup_logging(args.verbose)

    if args.list_models:
        display_models(DEFAULT_REGISTRY)
        return

    try:
        config = ExporterConfig(
            listen_address=args.address,
            listen_port=args.port,
            adapter=args.adapter,
            scan_duration_seconds=args.duration,
            name_filter=not args.no_name_filter,
        )
    except ValidationError as e:
        print_error(f"Invalid configuration:\n{e}")
        sys.exit(2)

    registry: ModelRegistry = DEFAULT_REGISTRY.with_name_filter(config.name_filter)
    collector = DeviceCollector()
    table = DeviceTable(registry, collector)

    print_banner(
        "Govee Exporter",
        f"Metrics on http://{config.listen_endpoint}/metrics - press Ctrl+C to stop",
    )

    stats: RouterStats | None = None
    try:
        start_metrics_server(config, create_registry(collector))
        stats = asyncio.run(run_exporter(config, table))
    except KeyboardInterrupt:
        print("\nStopped")
    except ExporterError as e:
        print_error(str(e))
        sys.exit(1)
    finally:
        display_devices(table.bindings(), stats)


if __name__ == "__main__":
    main()
