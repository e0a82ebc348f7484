"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable

import pytest
from prometheus_client import CollectorRegistry

from govee_exporter.decoders.models import GOVEE_H5055_VENDOR_ID, GOVEE_H5075_VENDOR_ID
from govee_exporter.decoders.registry import DEFAULT_REGISTRY
from govee_exporter.devices.table import DeviceTable
from govee_exporter.metrics.collector import DeviceCollector
from govee_exporter.metrics.server import create_registry
from govee_exporter.scanner.events import PeerProperties, RadioEvent

H5075 = GOVEE_H5075_VENDOR_ID
H5055 = GOVEE_H5055_VENDOR_ID
APPLE_VENDOR_ID = 0x004C


def make_h5075_payload(temp_tenths: int, humidity_tenths: int, battery: int) -> bytes:
    """Build a GVH5075 manufacturer payload from tenths of a degree/percent."""
    encoded = temp_tenths * 1000 + humidity_tenths
    return bytes([0x00]) + encoded.to_bytes(3, "big") + bytes([battery, 0x00])


class FakePeerDirectory:
    """In-memory stand-in for the radio layer's peer queries."""

    def __init__(self) -> None:
        self.peers: dict[str, PeerProperties] = {}
        self.queries: list[str] = []

    def add(self, peer_id: str, name: str | None, *vendor_ids: int) -> None:
        self.peers[peer_id] = PeerProperties(peer_id, name, frozenset(vendor_ids))

    async def peer_properties(self, peer_id: str) -> PeerProperties | None:
        self.queries.append(peer_id)
        return self.peers.get(peer_id)


async def event_stream(events: Iterable[RadioEvent]) -> AsyncIterator[RadioEvent]:
    """Turn a list of events into an async stream."""
    for event in events:
        yield event


@pytest.fixture
def collector() -> DeviceCollector:
    """Provide an empty device collector."""
    return DeviceCollector()


@pytest.fixture
def prom_registry(collector: DeviceCollector) -> CollectorRegistry:
    """Provide a registry exposing the collector."""
    return create_registry(collector)


@pytest.fixture
def table(collector: DeviceCollector) -> DeviceTable:
    """Provide a device table over the default models, without name filtering."""
    return DeviceTable(DEFAULT_REGISTRY, collector)


@pytest.fixture
def directory() -> FakePeerDirectory:
    """Provide an empty fake peer directory."""
    return FakePeerDirectory()


@pytest.fixture
def h5075_payload() -> bytes:
    """Reference GVH5075 payload: 22.5 C, 44.5 %, battery 90."""
    return bytes([0x00, 3, 112, 165, 90, 0x00])
