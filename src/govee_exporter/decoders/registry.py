"""Registry of supported device models.

Maps a BLE manufacturer id to the decoder and metric-sink factory for
that model. Supporting a new model means writing one decoder module
and adding one ``ModelHandle`` here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from govee_exporter.core.config import GOVEE_NAME_PREFIX
from govee_exporter.decoders import gvh5055, gvh5075
from govee_exporter.decoders.models import DeviceModel, Measurement

if TYPE_CHECKING:
    from govee_exporter.metrics.collector import DeviceCollector
    from govee_exporter.metrics.sink import MetricSink

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes], Measurement]
SinkFactory = Callable[[str, DeviceModel, "DeviceCollector"], "MetricSink"]


def _default_sink_factory(
    device_name: str, model: DeviceModel, collector: DeviceCollector
) -> MetricSink:
    from govee_exporter.metrics.sink import MetricSink

    return MetricSink.register(device_name, model, collector)


@dataclass(frozen=True)
class ModelHandle:
    """Everything needed to serve one device model."""

    model: DeviceModel
    vendor_id: int
    decoder: Decoder
    sink_factory: SinkFactory = _default_sink_factory
    name_prefix: str | None = None

    @property
    def model_name(self) -> str:
        return self.model.value

    def matches_name(self, name: str | None) -> bool:
        """Check a broadcast name against the model's prefix.

        Unknown names and models without a prefix always match.
        """
        if not name or not self.name_prefix:
            return True
        return name.upper().startswith(self.name_prefix.upper())


class ModelRegistry:
    """Static lookup table from vendor id to model handle.

    Example:
        >>> handle = DEFAULT_REGISTRY.resolve(0xEC88, "GVH5075_1A2B")
        >>> handle.model_name
        'GVH5075'
    """

    def __init__(self, handles: Iterable[ModelHandle], name_filter: bool = False) -> None:
        """Initialize registry.

        Args:
            handles: Model handles, one per vendor id.
            name_filter: Reject peers whose known name lacks the model prefix.

        Raises:
            ValueError: If two handles share a vendor id.
        """
        self._handles: dict[int, ModelHandle] = {}
        for handle in handles:
            if handle.vendor_id in self._handles:
                raise ValueError(f"Duplicate vendor id 0x{handle.vendor_id:04X}")
            self._handles[handle.vendor_id] = handle
        self.name_filter = name_filter

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[ModelHandle]:
        return iter(self._handles.values())

    def __contains__(self, vendor_id: object) -> bool:
        return vendor_id in self._handles

    def with_name_filter(self, enabled: bool) -> ModelRegistry:
        """Return a copy of this registry with name filtering toggled."""
        return ModelRegistry(self._handles.values(), name_filter=enabled)

    def resolve(self, vendor_id: int, name: str | None = None) -> ModelHandle | None:
        """Look up the model for a vendor id.

        Args:
            vendor_id: BLE manufacturer id.
            name: Broadcast name, if known.

        Returns:
            Matching ModelHandle, or None for unrelated traffic.
        """
        handle = self._handles.get(vendor_id)
        if handle is None:
            return None
        if self.name_filter and not handle.matches_name(name):
            logger.debug(
                "Vendor 0x%04X matched %s but name %r did not", vendor_id, handle.model_name, name
            )
            return None
        return handle


DEFAULT_REGISTRY = ModelRegistry(
    [
        ModelHandle(
            model=DeviceModel.GVH5075,
            vendor_id=gvh5075.VENDOR_ID,
            decoder=gvh5075.decode,
            name_prefix=GOVEE_NAME_PREFIX,
        ),
        ModelHandle(
            model=DeviceModel.GVH5055,
            vendor_id=gvh5055.VENDOR_ID,
            decoder=gvh5055.decode,
            name_prefix=GOVEE_NAME_PREFIX,
        ),
    ]
)
