"""Govee BLE Exporter - Prometheus metrics from Govee thermometer advertisements."""

from govee_exporter.core.config import ExporterConfig
from govee_exporter.core.exceptions import (
    DecodeError,
    ExporterError,
    LayoutUnknownError,
    MetricRegistrationError,
    PayloadLengthError,
    ScannerError,
    VendorMismatchError,
)
from govee_exporter.decoders import DEFAULT_REGISTRY, DeviceModel, Measurement, ModelRegistry
from govee_exporter.devices import DeviceTable, DispatchOutcome
from govee_exporter.metrics import DeviceCollector, MetricSink
from govee_exporter.scanner import AdvertisementRouter, BleakEventSource

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "ModelRegistry",
    "DEFAULT_REGISTRY",
    "DeviceTable",
    "DispatchOutcome",
    "MetricSink",
    "DeviceCollector",
    "AdvertisementRouter",
    "BleakEventSource",
    # Data models
    "DeviceModel",
    "Measurement",
    # Config
    "ExporterConfig",
    # Exceptions
    "ExporterError",
    "DecodeError",
    "PayloadLengthError",
    "LayoutUnknownError",
    "VendorMismatchError",
    "MetricRegistrationError",
    "ScannerError",
]
