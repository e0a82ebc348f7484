"""Tests for the CLI entry point."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from unittest.mock import patch

import pytest

from govee_exporter.core.config import ExporterConfig
from govee_exporter.decoders.registry import DEFAULT_REGISTRY
from govee_exporter.devices.table import DeviceTable
from govee_exporter.metrics.collector import DeviceCollector
from govee_exporter.scanner.events import DeviceDiscovered, ManufacturerDataAdvertisement

from .conftest import H5075, FakePeerDirectory

PEER = "A4:C1:38:00:11:22"


class FakeEventSource(FakePeerDirectory):
    """Event source replaying a fixed list of events."""

    def __init__(self, events: list) -> None:
        super().__init__()
        self._events = events
        self.started = False
        self.stopped = False

    async def __aenter__(self) -> FakeEventSource:
        self.started = True
        return self

    async def __aexit__(self, *args) -> None:
        self.stopped = True

    async def events(self) -> AsyncIterator:
        for event in self._events:
            yield event


class TestCLIArguments:
    """Test CLI argument parsing."""

    def test_main_imports(self) -> None:
        """CLI module exposes main and the parser builder."""
        from govee_exporter.cli import main

        assert callable(main.main)
        assert callable(main.build_parser)

    def test_help(self) -> None:
        """--help exits cleanly."""
        from govee_exporter.cli.main import main

        with patch.object(sys, "argv", ["govee-exporter", "--help"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 0

    def test_parser_defaults(self) -> None:
        """Defaults match the exporter configuration defaults."""
        from govee_exporter.cli.main import build_parser

        args = build_parser().parse_args([])
        assert args.address == "0.0.0.0"
        assert args.port == 8888
        assert args.adapter is None
        assert args.no_name_filter is False

    def test_list_models(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--list-models prints the supported models and returns."""
        from govee_exporter.cli.main import main

        with patch.object(sys, "argv", ["govee-exporter", "--list-models"]):
            main()

        out = capsys.readouterr().out
        assert "GVH5075" in out
        assert "GVH5055" in out

    def test_invalid_port(self) -> None:
        """Out-of-range ports exit with status 2."""
        from govee_exporter.cli.main import main

        with patch.object(sys, "argv", ["govee-exporter", "--port", "0"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 2


class TestRunExporter:
    """Test the scan loop wiring."""

    @pytest.mark.asyncio
    async def test_run_until_stream_ends(self) -> None:
        """Events from the source reach the table."""
        from govee_exporter.cli.main import run_exporter

        source = FakeEventSource(
            [
                DeviceDiscovered(PEER),
                ManufacturerDataAdvertisement(PEER, {H5075: bytes([0, 3, 112, 165, 90, 0])}),
            ]
        )
        source.add(PEER, "GVH5075_1122", H5075)
        table = DeviceTable(DEFAULT_REGISTRY, DeviceCollector())

        stats = await run_exporter(ExporterConfig(), table, source=source)

        assert stats.updated == 1
        assert table.lookup(PEER).sink.measurement.temperature_c == 22.5
        assert source.started
        assert source.stopped
