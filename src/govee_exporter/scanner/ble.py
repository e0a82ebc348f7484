"""bleak binding that turns BLE detection callbacks into radio events."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from types import TracebackType
from typing import Any

from bleak import BleakScanner
from bleak.backends.device import BLEDevice
from bleak.backends.scanner import AdvertisementData
from bleak.exc import BleakError

from govee_exporter.core.exceptions import ScannerError
from govee_exporter.scanner.events import (
    DeviceDiscovered,
    ManufacturerDataAdvertisement,
    PeerProperties,
    RadioEvent,
)

logger = logging.getLogger(__name__)


class BleakEventSource:
    """BLE scanner producing an ordered stream of radio events.

    A peer is announced with DeviceDiscovered the first time it is seen
    and again whenever it advertises a manufacturer id not seen before.
    Every advertisement carrying manufacturer data is forwarded.

    Example:
        >>> async with BleakEventSource() as source:
        ...     async for event in source.events():
        ...         print(event)
    """

    def __init__(self, adapter: str | None = None) -> None:
        """Initialize event source.

        Args:
            adapter: Bluetooth adapter (e.g. "hci0"). None = platform default.
        """
        self.adapter = adapter
        self._queue: asyncio.Queue[RadioEvent] = asyncio.Queue()
        self._peers: dict[str, PeerProperties] = {}
        self._scanner: BleakScanner | None = None

    async def __aenter__(self) -> BleakEventSource:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.stop()

    @property
    def peer_count(self) -> int:
        """Number of distinct peers seen."""
        return len(self._peers)

    def _scanner_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"detection_callback": self.detection_callback}
        if self.adapter:
            kwargs["adapter"] = self.adapter
        return kwargs

    async def start(self) -> None:
        """Start scanning.

        Raises:
            ScannerError: If the adapter is missing or cannot scan.
        """
        if self._scanner is not None:
            return

        scanner = BleakScanner(**self._scanner_kwargs())
        try:
            await scanner.start()
        except (BleakError, OSError) as e:
            raise ScannerError("Failed to start BLE scanner", str(e)) from e

        self._scanner = scanner
        logger.info("BLE scanner started (adapter: %s)", self.adapter or "default")

    async def stop(self) -> None:
        """Stop scanning."""
        if self._scanner is None:
            return

        scanner, self._scanner = self._scanner, None
        try:
            await scanner.stop()
        except BleakError as e:
            logger.warning("BLE scanner did not stop cleanly: %s", e)
        logger.info("BLE scanner stopped")

    def detection_callback(self, device: BLEDevice, advertisement_data: AdvertisementData) -> None:
        """Translate one bleak detection into radio events.

        Passed to ``BleakScanner``; runs on the event loop thread.
        """
        peer_id = device.address
        name = advertisement_data.local_name or device.name
        manufacturer_data = dict(advertisement_data.manufacturer_data or {})

        known = self._peers.get(peer_id)
        known_ids = known.manufacturer_ids if known else frozenset()
        vendor_ids = known_ids | frozenset(manufacturer_data)
        self._peers[peer_id] = PeerProperties(
            peer_id=peer_id,
            name=name or (known.name if known else None),
            manufacturer_ids=vendor_ids,
        )

        if known is None or vendor_ids != known_ids:
            self._queue.put_nowait(DeviceDiscovered(peer_id))
        if manufacturer_data:
            self._queue.put_nowait(ManufacturerDataAdvertisement(peer_id, manufacturer_data))

    async def peer_properties(self, peer_id: str) -> PeerProperties | None:
        """Get the latest name and vendor ids seen for a peer."""
        return self._peers.get(peer_id)

    async def events(self) -> AsyncIterator[RadioEvent]:
        """Yield radio events in arrival order, forever."""
        while True:
            yield await self._queue.get()
