"""GVH5075 thermometer/hygrometer payload decoder.

Manufacturer data layout (vendor id 0xEC88)::

    [0]     unused
    [1..3]  24-bit big-endian value E, packed as TTTHHH where
            TTT = 10 x temperature and HHH = 10 x humidity
    [4]     battery percentage (0-100)

E.g. ``[_, 3, 112, 165, 90, ...]`` gives E = 225445, which unpacks
to 22.5 C and 44.5 % humidity.
"""

from __future__ import annotations

from govee_exporter.core.exceptions import PayloadLengthError
from govee_exporter.decoders.models import (
    GOVEE_H5075_VENDOR_ID,
    DeviceModel,
    GVH5075Measurement,
)

VENDOR_ID = GOVEE_H5075_VENDOR_ID
MIN_PAYLOAD_LENGTH = 5


def decode(payload: bytes) -> GVH5075Measurement:
    """Decode a GVH5075 manufacturer payload.

    Args:
        payload: Manufacturer data bytes for vendor id 0xEC88.

    Returns:
        Decoded measurement.

    Raises:
        PayloadLengthError: If the payload is shorter than 5 bytes.

    Example:
        >>> decode(bytes([0, 3, 112, 165, 90, 0])).temperature_c
        22.5
    """
    if len(payload) < MIN_PAYLOAD_LENGTH:
        raise PayloadLengthError(DeviceModel.GVH5075.value, payload, MIN_PAYLOAD_LENGTH)

    encoded = int.from_bytes(payload[1:4], "big")
    return GVH5075Measurement.from_values(
        temperature_c=(encoded // 1000) / 10.0,
        humidity_percentage=(encoded % 1000) / 10.0,
        battery_percentage=payload[4],
    )
