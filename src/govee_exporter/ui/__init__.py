"""Terminal output."""

from govee_exporter.ui.display import (
    display_devices,
    display_models,
    get_console,
    print_banner,
    print_error,
)

__all__ = [
    "get_console",
    "print_banner",
    "print_error",
    "display_models",
    "display_devices",
]
