"""Custom exception hierarchy for the exporter."""

from __future__ import annotations


class ExporterError(Exception):
    """Base exception for all exporter errors."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DecodeError(ExporterError):
    """Manufacturer payload could not be turned into a measurement."""

    def __init__(self, model: str, payload: bytes, details: str | None = None) -> None:
        self.model = model
        self.payload = bytes(payload)
        super().__init__(f"Failed to decode {model} payload {self.payload.hex()}", details)


class PayloadLengthError(DecodeError):
    """Payload is shorter than the model's layout requires."""

    def __init__(self, model: str, payload: bytes, expected: int) -> None:
        self.expected = expected
        self.actual = len(payload)
        super().__init__(
            model,
            payload,
            f"need at least {expected} bytes, got {self.actual}",
        )


class LayoutUnknownError(DecodeError):
    """Model is recognized but its payload layout is not implemented."""

    def __init__(self, model: str, payload: bytes) -> None:
        super().__init__(model, payload, "payload layout unknown")


class VendorMismatchError(ExporterError):
    """Advertisement vendor id disagrees with the peer's binding."""

    def __init__(self, peer_id: str, expected: int, actual: int) -> None:
        self.peer_id = peer_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Vendor mismatch for {peer_id}",
            f"bound to 0x{expected:04X}, advertised 0x{actual:04X}",
        )


class MetricRegistrationError(ExporterError):
    """A device's metric identity collides with one already exported."""

    def __init__(self, device_name: str, model: str, details: str | None = None) -> None:
        self.device_name = device_name
        self.model = model
        super().__init__(f"Metrics already registered for {device_name} ({model})", details)


class ScannerError(ExporterError):
    """Bluetooth scanner could not be started or stopped."""

    pass
