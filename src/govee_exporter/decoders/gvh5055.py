"""GVH5055 meat thermometer payload decoder.

The vendor id (0xAE16) is recognized so these devices get bound and
counted, but the probe layout has not been worked out yet.
"""

from __future__ import annotations

from govee_exporter.core.exceptions import LayoutUnknownError
from govee_exporter.decoders.models import (
    GOVEE_H5055_VENDOR_ID,
    DeviceModel,
    GVH5055Measurement,
)

VENDOR_ID = GOVEE_H5055_VENDOR_ID


def decode(payload: bytes) -> GVH5055Measurement:
    """Always fails: the GVH5055 layout is unknown.

    Raises:
        LayoutUnknownError: For every payload.
    """
    raise LayoutUnknownError(DeviceModel.GVH5055.value, payload)
