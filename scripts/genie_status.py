#!/usr/bin/env python3
"""Live Rituals Genie check.

Reads RITUALS_EMAIL / RITUALS_PASSWORD (and optional RITUALS_* settings)
from the environment, bootstraps a session and prints the fan state.

Examples::

    python scripts/genie_status.py status
    python scripts/genie_status.py on
    python scripts/genie_status.py speed 50
    python scripts/genie_status.py logout
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyrituals import FanAccessory, FanState, Hub, RitualsClient, RitualsConfig, RitualsError  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("-v", "--verbose", action="store_true", help="enable DEBUG logging")
    parser.add_argument("--storage-dir", default=None, help="override RITUALS_STORAGE_DIR")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("status", help="print the current fan state")
    sub.add_parser("on", help="turn the diffuser on")
    sub.add_parser("off", help="turn the diffuser off")
    speed = sub.add_parser("speed", help="set rotation speed (0-100)")
    speed.add_argument("value", type=int)
    sub.add_parser("logout", help="forget the stored account and hub hashes")
    return parser.parse_args(argv)


def _report(accessory: FanAccessory, hub: Hub | None) -> dict[str, Any]:
    state = FanState.from_hub(hub)
    return {
        "name": accessory.information.name,
        "serial_number": accessory.information.serial_number,
        "firmware_revision": accessory.information.firmware_revision,
        "fragrance": hub.fragrance if hub is not None else None,
        "fill_level": hub.fill_level if hub is not None else None,
        "on": state.on,
        "speed": state.speed,
    }


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, Any] = {}
    if args.storage_dir:
        overrides["storage_dir"] = args.storage_dir
    config = RitualsConfig.from_env(**overrides)

    async with RitualsClient(config) as client:
        if args.command == "logout":
            await client.logout()
            print("Stored credentials cleared")
            return 0

        await client.start()
        accessory = FanAccessory(client)

        if args.command == "on":
            await accessory.set_on(True)
        elif args.command == "off":
            await accessory.set_on(False)
        elif args.command == "speed":
            await accessory.set_speed(args.value)

        print(json.dumps(_report(accessory, client.snapshot), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(_run(args))
    except RitualsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
