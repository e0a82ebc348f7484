"""Data models for decoded Govee advertisements.

Defines the DeviceModel tag enum and the Measurement variants
produced by the per-model payload decoders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# BLE manufacturer ids (company identifiers) used as dispatch keys
GOVEE_H5075_VENDOR_ID: int = 0xEC88  # 60552
GOVEE_H5055_VENDOR_ID: int = 0xAE16  # 44566


class DeviceModel(str, Enum):
    """Supported Govee sensor models.

    Serves as the tag of the Measurement union.
    """

    GVH5075 = "GVH5075"
    GVH5055 = "GVH5055"


@dataclass(frozen=True)
class ChannelReading:
    """One sensing channel (probe) of a measurement."""

    temperature_c: float | None = None
    humidity_percentage: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "temperature_c": self.temperature_c,
            "humidity_percentage": self.humidity_percentage,
        }


@dataclass(frozen=True)
class Measurement:
    """Decoded values from a single advertisement.

    Channels are ordered; a channel is None when the device reported
    no value for it (e.g. an unplugged probe).
    """

    model: DeviceModel
    channels: tuple[ChannelReading | None, ...] = field(default_factory=tuple)
    battery_percentage: int | None = None

    @property
    def temperature_c(self) -> float | None:
        """Temperature of the first channel."""
        primary = self.channels[0] if self.channels else None
        return primary.temperature_c if primary else None

    @property
    def humidity_percentage(self) -> float | None:
        """Humidity of the first channel."""
        primary = self.channels[0] if self.channels else None
        return primary.humidity_percentage if primary else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "model": self.model.value,
            "channels": [c.to_dict() if c else None for c in self.channels],
            "battery_percentage": self.battery_percentage,
        }


@dataclass(frozen=True)
class GVH5075Measurement(Measurement):
    """Thermometer/hygrometer: one channel plus battery."""

    model: DeviceModel = DeviceModel.GVH5075

    @classmethod
    def from_values(
        cls,
        temperature_c: float,
        humidity_percentage: float,
        battery_percentage: int,
    ) -> GVH5075Measurement:
        return cls(
            channels=(ChannelReading(temperature_c, humidity_percentage),),
            battery_percentage=battery_percentage,
        )


@dataclass(frozen=True)
class GVH5055Measurement(Measurement):
    """Multi-probe meat thermometer, up to six temperature probes."""

    model: DeviceModel = DeviceModel.GVH5055

    MAX_PROBES = 6

    def __post_init__(self) -> None:
        if len(self.channels) > self.MAX_PROBES:
            raise ValueError(
                f"GVH5055 has at most {self.MAX_PROBES} probes, got {len(self.channels)}"
            )
