"""Govee BLE payload decoders and the model registry.

Supported models:
- GVH5075 thermometer/hygrometer (vendor id 0xEC88)
- GVH5055 meat thermometer (vendor id 0xAE16, layout not yet decoded)
"""

from __future__ import annotations

from govee_exporter.decoders.models import (
    GOVEE_H5055_VENDOR_ID,
    GOVEE_H5075_VENDOR_ID,
    ChannelReading,
    DeviceModel,
    GVH5055Measurement,
    GVH5075Measurement,
    Measurement,
)
from govee_exporter.decoders.registry import DEFAULT_REGISTRY, ModelHandle, ModelRegistry

__all__ = [
    # Registry
    "ModelRegistry",
    "ModelHandle",
    "DEFAULT_REGISTRY",
    # Data models
    "DeviceModel",
    "Measurement",
    "ChannelReading",
    "GVH5075Measurement",
    "GVH5055Measurement",
    # Vendor ids
    "GOVEE_H5075_VENDOR_ID",
    "GOVEE_H5055_VENDOR_ID",
]
