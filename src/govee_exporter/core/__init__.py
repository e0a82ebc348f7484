"""Core settings and error types."""

from govee_exporter.core.config import (
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_LISTEN_PORT,
    GOVEE_NAME_PREFIX,
    METRIC_PREFIX,
    UNKNOWN_DEVICE_NAME,
    ExporterConfig,
)
from govee_exporter.core.exceptions import (
    DecodeError,
    ExporterError,
    LayoutUnknownError,
    MetricRegistrationError,
    PayloadLengthError,
    ScannerError,
    VendorMismatchError,
)

__all__ = [
    "ExporterConfig",
    "DEFAULT_LISTEN_ADDRESS",
    "DEFAULT_LISTEN_PORT",
    "METRIC_PREFIX",
    "UNKNOWN_DEVICE_NAME",
    "GOVEE_NAME_PREFIX",
    "ExporterError",
    "DecodeError",
    "PayloadLengthError",
    "LayoutUnknownError",
    "VendorMismatchError",
    "MetricRegistrationError",
    "ScannerError",
]
