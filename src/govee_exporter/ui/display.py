"""Rich terminal display functions for the exporter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from govee_exporter.decoders.registry import ModelRegistry
    from govee_exporter.devices.table import DeviceBinding
    from govee_exporter.scanner.router import RouterStats


# Global console instance
_console: Console | None = None


def get_console() -> Console:
    """Get the global rich console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def print_banner(title: str, subtitle: str | None = None) -> None:
    """Print a styled banner.

    Args:
        title: Main title text.
        subtitle: Optional subtitle.
    """
    console = get_console()
    text = Text(title, style="bold cyan")
    if subtitle:
        text.append(f"\n{subtitle}", style="dim")
    console.print(Panel(text, border_style="cyan"))


def print_error(message: str) -> None:
    """Print an error message.

    Args:
        message: Message to display.
    """
    get_console().print(f"[bold red]✗[/] {message}")


def display_models(registry: ModelRegistry) -> None:
    """Display the supported device models.

    Args:
        registry: Model registry to list.
    """
    table = Table(title="Supported Models", show_header=True, header_style="bold magenta")
    table.add_column("Model", style="cyan")
    table.add_column("Vendor ID", justify="right", style="green")
    table.add_column("Name Prefix", style="dim")

    for handle in registry:
        table.add_row(
            handle.model_name,
            f"0x{handle.vendor_id:04X} ({handle.vendor_id})",
            handle.name_prefix or "-",
        )

    get_console().print(table)


def _fmt(value: float | int | None, unit: str) -> str:
    return "-" if value is None else f"{value}{unit}"


def display_devices(bindings: list[DeviceBinding], stats: RouterStats | None = None) -> None:
    """Display bound devices with their last decoded values.

    Args:
        bindings: Device bindings to show.
        stats: Optional router counters for a summary panel.
    """
    console = get_console()

    if stats is not None:
        summary = Text()
        summary.append("Events: ", style="dim")
        summary.append(f"{stats.events}\n", style="cyan")
        summary.append("Decoded: ", style="dim")
        summary.append(f"{stats.updated}\n", style="bold green")
        summary.append("Decode Failures: ", style="dim")
        summary.append(f"{stats.decode_failures}\n", style="yellow")
        summary.append("Vendor Mismatches: ", style="dim")
        summary.append(f"{stats.vendor_mismatches}", style="yellow")
        console.print(Panel(summary, title="[bold]Session[/]", border_style="green"))

    if not bindings:
        console.print("[dim]No supported devices discovered.[/]")
        return

    table = Table(title="Bound Devices", show_header=True, header_style="bold magenta")
    table.add_column("Peer", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Model")
    table.add_column("Temp", justify="right", style="green")
    table.add_column("Humidity", justify="right", style="green")
    table.add_column("Battery", justify="right", style="yellow")
    table.add_column("Adverts", justify="right")

    for binding in bindings:
        snapshot = binding.sink.snapshot()
        measurement = snapshot.measurement
        table.add_row(
            binding.peer_id,
            binding.name,
            binding.model_name,
            _fmt(measurement.temperature_c if measurement else None, " °C"),
            _fmt(measurement.humidity_percentage if measurement else None, " %"),
            _fmt(measurement.battery_percentage if measurement else None, " %"),
            str(snapshot.advertisements),
        )

    console.print(table)
