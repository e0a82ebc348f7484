"""Tests for exporter configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from govee_exporter.core.config import DEFAULT_LISTEN_PORT, ExporterConfig
from govee_exporter.core.exceptions import ExporterError, VendorMismatchError


class TestExporterConfig:
    """Tests for ExporterConfig validation."""

    def test_defaults(self) -> None:
        """Defaults listen on all interfaces, port 8888, with name filtering."""
        config = ExporterConfig()
        assert config.listen_address == "0.0.0.0"
        assert config.listen_port == DEFAULT_LISTEN_PORT == 8888
        assert config.adapter is None
        assert config.scan_duration_seconds is None
        assert config.name_filter is True

    def test_listen_endpoint(self) -> None:
        """Endpoint renders as host:port."""
        config = ExporterConfig(listen_address="127.0.0.1", listen_port=9100)
        assert config.listen_endpoint == "127.0.0.1:9100"

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_invalid_port(self, port: int) -> None:
        """Ports outside 1-65535 are rejected."""
        with pytest.raises(ValidationError):
            ExporterConfig(listen_port=port)

    def test_invalid_duration(self) -> None:
        """Durations must be positive."""
        with pytest.raises(ValidationError):
            ExporterConfig(scan_duration_seconds=0)


class TestExceptions:
    """Tests for exception formatting."""

    def test_message_with_details(self) -> None:
        """Details are appended to the message."""
        assert str(ExporterError("Failed", "reason")) == "Failed: reason"

    def test_message_without_details(self) -> None:
        """Message alone when there are no details."""
        assert str(ExporterError("Failed")) == "Failed"

    def test_vendor_mismatch_format(self) -> None:
        """Vendor ids are shown in hex."""
        error = VendorMismatchError("A4:C1:38:00:11:22", 0xEC88, 0xAE16)
        assert str(error) == (
            "Vendor mismatch for A4:C1:38:00:11:22: bound to 0xEC88, advertised 0xAE16"
        )
