"""Device instance table.

Binds each discovered BLE peer to its model's decoder and a dedicated
MetricSink, and routes manufacturer payloads to the right binding.
Bindings are never removed; they live as long as the process.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum

from govee_exporter.core.config import UNKNOWN_DEVICE_NAME
from govee_exporter.core.exceptions import DecodeError, VendorMismatchError
from govee_exporter.decoders.models import DeviceModel, Measurement
from govee_exporter.decoders.registry import ModelHandle, ModelRegistry
from govee_exporter.metrics.collector import DeviceCollector
from govee_exporter.metrics.sink import MetricSink

logger = logging.getLogger(__name__)


class DispatchOutcome(str, Enum):
    """Result of routing one advertisement payload."""

    UPDATED = "updated"
    UNKNOWN_PEER = "unknown_peer"
    VENDOR_MISMATCH = "vendor_mismatch"
    DECODE_FAILED = "decode_failed"


@dataclass(frozen=True)
class DeviceBinding:
    """A discovered peer bound to its model and metric sink."""

    peer_id: str
    vendor_id: int
    name: str
    handle: ModelHandle
    sink: MetricSink

    @property
    def model(self) -> DeviceModel:
        return self.handle.model

    @property
    def model_name(self) -> str:
        return self.handle.model_name


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a dispatch plus the context needed to report it."""

    outcome: DispatchOutcome
    peer_id: str
    binding: DeviceBinding | None = None
    measurement: Measurement | None = None
    error: Exception | None = None

    @property
    def updated(self) -> bool:
        return self.outcome is DispatchOutcome.UPDATED


def placeholder_name(peer_id: str) -> str:
    """Name used for peers that never advertised a local name."""
    return f"{UNKNOWN_DEVICE_NAME}_{peer_id}"


class DeviceTable:
    """Mapping from peer id to device binding.

    The advertisement router is the only writer; the metrics server
    thread only reads sinks through the collector. A lock guards the
    mapping itself.

    Example:
        >>> table = DeviceTable(DEFAULT_REGISTRY, DeviceCollector())
        >>> table.bind("A4:C1:38:00:11:22", 0xEC88, "GVH5075_1122")
        True
        >>> table.dispatch("A4:C1:38:00:11:22", 0xEC88, payload).outcome
        <DispatchOutcome.UPDATED: 'updated'>
    """

    def __init__(self, registry: ModelRegistry, collector: DeviceCollector) -> None:
        """Initialize device table.

        Args:
            registry: Supported models.
            collector: Collector the new sinks are exported through.
        """
        self.registry = registry
        self.collector = collector
        self._bindings: dict[str, DeviceBinding] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)

    def __contains__(self, peer_id: object) -> bool:
        with self._lock:
            return peer_id in self._bindings

    def bind(self, peer_id: str, vendor_id: int, name: str | None = None) -> bool:
        """Bind a peer to the model registered for its vendor id.

        Args:
            peer_id: Radio peer identifier (BLE address).
            vendor_id: Manufacturer id the peer advertised.
            name: Broadcast name, if known.

        Returns:
            True if a new binding was created, False if the peer is
            already bound or the vendor id is not supported.

        Raises:
            MetricRegistrationError: If the peer's metrics collide with an
                already exported device. No binding is created.
        """
        with self._lock:
            if peer_id in self._bindings:
                return False

            handle = self.registry.resolve(vendor_id, name)
            if handle is None:
                return False

            device_name = name or placeholder_name(peer_id)
            sink = handle.sink_factory(device_name, handle.model, self.collector)
            self._bindings[peer_id] = DeviceBinding(
                peer_id=peer_id,
                vendor_id=vendor_id,
                name=device_name,
                handle=handle,
                sink=sink,
            )

        logger.info("Bound %s as %s (%s)", peer_id, device_name, handle.model_name)
        return True

    def lookup(self, peer_id: str) -> DeviceBinding | None:
        """Get the binding for a peer.

        Args:
            peer_id: Radio peer identifier.

        Returns:
            DeviceBinding if the peer is bound.
        """
        with self._lock:
            return self._bindings.get(peer_id)

    def bindings(self) -> list[DeviceBinding]:
        """Get all bindings sorted by device name."""
        with self._lock:
            return sorted(self._bindings.values(), key=lambda b: (b.name, b.peer_id))

    def dispatch(self, peer_id: str, vendor_id: int, payload: bytes) -> DispatchResult:
        """Decode a payload and update the peer's sink.

        The sink is only written when decoding succeeds; mismatched
        vendors and bad payloads leave the last values in place.

        Args:
            peer_id: Radio peer identifier.
            vendor_id: Manufacturer id the payload was advertised under.
            payload: Manufacturer data bytes.

        Returns:
            DispatchResult describing what happened.
        """
        binding = self.lookup(peer_id)
        if binding is None:
            return DispatchResult(DispatchOutcome.UNKNOWN_PEER, peer_id)

        if vendor_id != binding.vendor_id:
            return DispatchResult(
                DispatchOutcome.VENDOR_MISMATCH,
                peer_id,
                binding=binding,
                error=VendorMismatchError(peer_id, binding.vendor_id, vendor_id),
            )

        try:
            measurement = binding.handle.decoder(payload)
        except DecodeError as e:
            return DispatchResult(DispatchOutcome.DECODE_FAILED, peer_id, binding=binding, error=e)

        binding.sink.update(measurement)
        return DispatchResult(
            DispatchOutcome.UPDATED, peer_id, binding=binding, measurement=measurement
        )
