"""Configuration constants and validated runtime settings."""

from __future__ import annotations

from pydantic import BaseModel, Field

# =============================================================================
# Metrics Endpoint
# =============================================================================
DEFAULT_LISTEN_ADDRESS: str = "0.0.0.0"
DEFAULT_LISTEN_PORT: int = 8888
METRIC_PREFIX: str = "govee"

# =============================================================================
# Device Naming
# =============================================================================
UNKNOWN_DEVICE_NAME: str = "unknown"  # Placeholder when a peer has no local name
GOVEE_NAME_PREFIX: str = "GVH"  # Govee thermometers advertise as GVH5075_XXXX


class ExporterConfig(BaseModel):
    """Runtime configuration for the exporter.

    Built from CLI flags; every field has a usable default so an
    empty config starts a scanner on the default adapter.
    """

    listen_address: str = DEFAULT_LISTEN_ADDRESS
    listen_port: int = Field(default=DEFAULT_LISTEN_PORT, ge=1, le=65535)
    adapter: str | None = None
    scan_duration_seconds: float | None = Field(default=None, gt=0)
    name_filter: bool = True

    @property
    def listen_endpoint(self) -> str:
        """Address the metrics server binds to, as ``host:port``."""
        return f"{self.listen_address}:{self.listen_port}"
