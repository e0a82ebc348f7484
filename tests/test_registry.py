"""Tests for the device model registry."""

from __future__ import annotations

import pytest

from govee_exporter.decoders import gvh5055, gvh5075
from govee_exporter.decoders.models import DeviceModel
from govee_exporter.decoders.registry import DEFAULT_REGISTRY, ModelHandle, ModelRegistry

from .conftest import APPLE_VENDOR_ID, H5055, H5075


class TestResolve:
    """Tests for vendor id resolution."""

    def test_resolve_h5075(self) -> None:
        """0xEC88 should resolve to the GVH5075 decoder."""
        handle = DEFAULT_REGISTRY.resolve(H5075, "GVH5075_1A2B")
        assert handle is not None
        assert handle.model == DeviceModel.GVH5075
        assert handle.model_name == "GVH5075"
        assert handle.decoder is gvh5075.decode

    def test_resolve_h5055(self) -> None:
        """0xAE16 should resolve even though it cannot be decoded."""
        handle = DEFAULT_REGISTRY.resolve(H5055, "GVH5055_0001")
        assert handle is not None
        assert handle.decoder is gvh5055.decode

    @pytest.mark.parametrize("vendor_id", [APPLE_VENDOR_ID, 0x0000, 0xFFFF, 0x0006])
    def test_unknown_vendor_returns_none(self, vendor_id: int) -> None:
        """Unrelated vendor ids resolve to None rather than raising."""
        assert DEFAULT_REGISTRY.resolve(vendor_id, "Some Phone") is None

    def test_resolve_without_name(self) -> None:
        """Name is optional."""
        assert DEFAULT_REGISTRY.resolve(H5075) is not None

    def test_default_registry_contents(self) -> None:
        """Default registry knows both Govee models."""
        assert len(DEFAULT_REGISTRY) == 2
        assert H5075 in DEFAULT_REGISTRY
        assert H5055 in DEFAULT_REGISTRY
        assert {h.model for h in DEFAULT_REGISTRY} == set(DeviceModel)


class TestNameFilter:
    """Tests for the optional broadcast-name check."""

    def test_filter_disabled_by_default(self) -> None:
        """Without filtering, the name does not matter."""
        assert DEFAULT_REGISTRY.resolve(H5075, "Kitchen") is not None

    def test_filter_rejects_wrong_prefix(self) -> None:
        """With filtering, a known name must carry the prefix."""
        registry = DEFAULT_REGISTRY.with_name_filter(True)
        assert registry.resolve(H5075, "Kitchen") is None

    def test_filter_accepts_prefix(self) -> None:
        """Prefix matching is case-insensitive."""
        registry = DEFAULT_REGISTRY.with_name_filter(True)
        assert registry.resolve(H5075, "GVH5075_1A2B") is not None
        assert registry.resolve(H5075, "gvh5075_1a2b") is not None

    def test_filter_accepts_unknown_name(self) -> None:
        """Peers without a name are not rejected."""
        registry = DEFAULT_REGISTRY.with_name_filter(True)
        assert registry.resolve(H5075, None) is not None
        assert registry.resolve(H5075, "") is not None

    def test_with_name_filter_copies(self) -> None:
        """Toggling the filter leaves the original registry untouched."""
        registry = DEFAULT_REGISTRY.with_name_filter(True)
        assert registry.name_filter is True
        assert DEFAULT_REGISTRY.name_filter is False


class TestCustomRegistry:
    """Tests for building registries with extra models."""

    def test_duplicate_vendor_rejected(self) -> None:
        """Two handles with one vendor id is a configuration error."""
        handle = ModelHandle(DeviceModel.GVH5075, H5075, gvh5075.decode)
        with pytest.raises(ValueError, match="0xEC88"):
            ModelRegistry([handle, handle])

    def test_custom_vendor_id(self) -> None:
        """Handles are keyed by their own vendor id."""
        handle = ModelHandle(DeviceModel.GVH5075, 0x1234, gvh5075.decode)
        registry = ModelRegistry([handle])
        assert registry.resolve(0x1234) is handle
        assert registry.resolve(H5075) is None

    def test_matches_name_without_prefix(self) -> None:
        """Handles without a prefix match any name."""
        handle = ModelHandle(DeviceModel.GVH5075, H5075, gvh5075.decode)
        assert handle.matches_name("Anything")
