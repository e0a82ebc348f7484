#!/usr/bin/env python3
"""Decode Govee manufacturer payloads without a Bluetooth adapter.

Useful for checking captured advertisements (e.g. from btmon or
nRF Connect) against the decoders.

Usage:
    python examples/decode_payload.py VENDOR_ID HEX_PAYLOAD

Example:
    # GVH5075 reading of 22.5 C / 44.5 % / battery 90
    python examples/decode_payload.py 0xEC88 000370a55a00
"""

import argparse
import sys

from govee_exporter.core.exceptions import DecodeError
from govee_exporter.decoders import DEFAULT_REGISTRY


def main() -> int:
    parser = argparse.ArgumentParser(description="Decode a Govee manufacturer payload")
    parser.add_argument("vendor_id", type=lambda v: int(v, 0), help="Manufacturer id, e.g. 0xEC88")
    parser.add_argument("payload", type=bytes.fromhex, help="Payload bytes as hex")
    args = parser.parse_args()

    handle = DEFAULT_REGISTRY.resolve(args.vendor_id)
    if handle is None:
        print(f"Vendor id 0x{args.vendor_id:04X} is not a supported model")
        return 1

    try:
        measurement = handle.decoder(args.payload)
    except DecodeError as e:
        print(f"{handle.model_name}: {e}")
        return 1

    print(f"Model:       {handle.model_name}")
    print(f"Temperature: {measurement.temperature_c} C")
    print(f"Humidity:    {measurement.humidity_percentage} %")
    print(f"Battery:     {measurement.battery_percentage} %")
    return 0


if __name__ == "__main__":
    sys.exit(main())
