"""Advertisement event router.

Consumes the radio event stream, binds newly discovered Govee peers
and feeds their advertisements through the device table. A single
bad advertisement is reported and dropped; it never stops the loop.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable
from dataclasses import asdict, dataclass
from typing import Any

from govee_exporter.core.exceptions import MetricRegistrationError
from govee_exporter.devices.table import DeviceTable, DispatchOutcome, DispatchResult
from govee_exporter.scanner.events import (
    DeviceDiscovered,
    ManufacturerDataAdvertisement,
    PeerDirectory,
    RadioEvent,
)

logger = logging.getLogger(__name__)


@dataclass
class RouterStats:
    """Event counters for a router session."""

    events: int = 0
    discoveries: int = 0
    bound: int = 0
    registration_failures: int = 0
    ignored: int = 0
    updated: int = 0
    decode_failures: int = 0
    vendor_mismatches: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)


class AdvertisementRouter:
    """Routes discovery and advertisement events to the device table.

    Example:
        >>> router = AdvertisementRouter(table, source)
        >>> stats = await router.run(source.events())
    """

    def __init__(self, table: DeviceTable, directory: PeerDirectory) -> None:
        """Initialize router.

        Args:
            table: Device table to bind peers into.
            directory: Radio layer queried for peer names and vendor ids.
        """
        self.table = table
        self.directory = directory
        self.stats = RouterStats()

    async def run(self, events: AsyncIterable[RadioEvent]) -> RouterStats:
        """Process events until the stream ends.

        Args:
            events: Ordered radio event stream.

        Returns:
            Counters for the session.
        """
        async for event in events:
            await self.handle_event(event)
        return self.stats

    async def handle_event(self, event: RadioEvent) -> None:
        """Process a single radio event."""
        self.stats.events += 1
        if isinstance(event, DeviceDiscovered):
            await self.handle_discovered(event)
        elif isinstance(event, ManufacturerDataAdvertisement):
            self.handle_advertisement(event)
        else:
            logger.debug("Ignoring unsupported event %r", event)

    async def handle_discovered(self, event: DeviceDiscovered) -> bool:
        """Bind a newly discovered peer if it is a supported model.

        Args:
            event: Discovery event.

        Returns:
            True if the peer was bound by this event.
        """
        self.stats.discoveries += 1
        peer_id = event.peer_id
        if peer_id in self.table:
            return False

        props = await self.directory.peer_properties(peer_id)
        if props is None:
            logger.debug("No properties for %s", peer_id)
            return False

        for vendor_id in sorted(props.manufacturer_ids):
            handle = self.table.registry.resolve(vendor_id, props.name)
            if handle is None:
                continue

            try:
                bound = self.table.bind(peer_id, vendor_id, props.name)
            except MetricRegistrationError as e:
                self.stats.registration_failures += 1
                logger.warning("Not binding %s: %s", peer_id, e)
                return False

            if bound:
                self.stats.bound += 1
            return bound

        logger.debug("Peer %s (%s) is not a supported model", peer_id, props.name)
        return False

    def handle_advertisement(self, event: ManufacturerDataAdvertisement) -> DispatchResult | None:
        """Dispatch an advertisement's payload for a bound peer.

        The payload under the peer's bound vendor id is used; if that id
        is absent the first advertised one is dispatched, which reports a
        vendor mismatch.

        Args:
            event: Advertisement event.

        Returns:
            DispatchResult, or None if the event was ignored.
        """
        binding = self.table.lookup(event.peer_id)
        if binding is None or not event.manufacturer_data:
            self.stats.ignored += 1
            return None

        if binding.vendor_id in event.manufacturer_data:
            vendor_id = binding.vendor_id
        else:
            vendor_id = next(iter(event.manufacturer_data))

        result = self.table.dispatch(
            event.peer_id, vendor_id, event.manufacturer_data[vendor_id]
        )
        self._report(result)
        return result

    def _report(self, result: DispatchResult) -> None:
        if result.outcome is DispatchOutcome.UPDATED and result.measurement is not None:
            self.stats.updated += 1
            measurement = result.measurement
            logger.debug(
                "%s -- Temp: %s, Humidity: %s, Battery: %s",
                result.peer_id,
                measurement.temperature_c,
                measurement.humidity_percentage,
                measurement.battery_percentage,
            )
        elif result.outcome is DispatchOutcome.DECODE_FAILED:
            self.stats.decode_failures += 1
            logger.warning("Dropping advertisement from %s: %s", result.peer_id, result.error)
        elif result.outcome is DispatchOutcome.VENDOR_MISMATCH:
            self.stats.vendor_mismatches += 1
            logger.warning("Dropping advertisement: %s", result.error)
        else:
            self.stats.ignored += 1
            logger.debug("Advertisement from unbound peer %s", result.peer_id)
