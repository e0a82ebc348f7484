"""Discovered device bindings."""

from govee_exporter.devices.table import (
    DeviceBinding,
    DeviceTable,
    DispatchOutcome,
    DispatchResult,
    placeholder_name,
)

__all__ = [
    "DeviceTable",
    "DeviceBinding",
    "DispatchOutcome",
    "DispatchResult",
    "placeholder_name",
]
