"""BLE scanning and advertisement routing."""

from govee_exporter.scanner.ble import BleakEventSource
from govee_exporter.scanner.events import (
    DeviceDiscovered,
    ManufacturerDataAdvertisement,
    PeerDirectory,
    PeerProperties,
    RadioEvent,
)
from govee_exporter.scanner.router import AdvertisementRouter, RouterStats

__all__ = [
    "AdvertisementRouter",
    "RouterStats",
    "BleakEventSource",
    "DeviceDiscovered",
    "ManufacturerDataAdvertisement",
    "PeerDirectory",
    "PeerProperties",
    "RadioEvent",
]
