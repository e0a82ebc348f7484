"""Events and peer queries exchanged with the radio layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, Union


@dataclass(frozen=True)
class DeviceDiscovered:
    """A peer was seen, or advertised new manufacturer ids."""

    peer_id: str


@dataclass(frozen=True)
class ManufacturerDataAdvertisement:
    """Manufacturer data from one advertisement, keyed by vendor id."""

    peer_id: str
    manufacturer_data: Mapping[int, bytes] = field(default_factory=dict)


RadioEvent = Union[DeviceDiscovered, ManufacturerDataAdvertisement]


@dataclass(frozen=True)
class PeerProperties:
    """What the radio layer knows about a peer."""

    peer_id: str
    name: str | None = None
    manufacturer_ids: frozenset[int] = frozenset()


class PeerDirectory(Protocol):
    """Source of peer properties for discovery handling."""

    async def peer_properties(self, peer_id: str) -> PeerProperties | None:
        ...
