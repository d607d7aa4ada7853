"""Command that lists the zainboxes of a merchant."""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from typing import Any, Sequence, TextIO

from .engine import Engine, EngineError
from .environment import Environment
from .models import ZainboxInfo
from .zainbox import ZainboxService

_KEY_VARIABLE = "ZAINPAY_MERCHANT_KEY"


def _zainbox_list(data: Any) -> list[ZainboxInfo]:
    if not isinstance(data, list):
        raise ValueError("zainbox data must be a list")
    return [ZainboxInfo.from_dict(item) for item in data]


async def run(engine: Engine, status: bool | None = False, out: TextIO | None = None) -> int:
    """List zainboxes through ``engine`` and report the result; return an exit code."""
    out = out if out is not None else sys.stdout
    response = await ZainboxService(engine).list(status)

    if response.has_succeeded():
        print(f"Status: {response.status}", file=out)
        print(f"Code: {response.code}", file=out)
        print(f"Description: {response.description}", file=out)
        print(f"Data: {json.dumps(response.raw_data)}", file=out)
        zainboxes = response.parse_data(_zainbox_list)
        if zainboxes is None:
            print("Could not parse zainbox data", file=out)
        else:
            print("Zainboxes:", file=out)
            for box in zainboxes:
                state = "active" if box.is_active else "inactive"
                print(f"  {box.code_name}  {box.name}  {state}  {box.callback_url}", file=out)
        return 0

    print(f"Status Code: {response.status_code}", file=out)
    print(f"Status: {response.status}", file=out)
    print(f"Code: {response.code}", file=out)
    print(f"Description: {response.description}", file=out)
    return 1


async def _run_with_engine(environment: Environment, merchant_key: str, status: bool | None) -> int:
    async with Engine(environment, merchant_key) as engine:
        return await run(engine, status)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="zainpay", description="List the zainboxes of a merchant.")
    parser.add_argument(
        "--environment",
        choices=[env.value.lower() for env in Environment],
        default="sandbox",
    )
    parser.add_argument(
        "--merchant-key",
        default=os.environ.get(_KEY_VARIABLE),
        help=f"merchant key (default: ${_KEY_VARIABLE})",
    )
    parser.add_argument(
        "--status",
        choices=["true", "false", "all"],
        default="false",
        help="list active, inactive or all zainboxes",
    )
    args = parser.parse_args(argv)
    if not args.merchant_key:
        parser.error(f"a merchant key is required (--merchant-key or {_KEY_VARIABLE})")

    environment = Environment(args.environment.capitalize())
    try:
        environment.base_url()
    except ValueError as exc:
        print(f"zainpay: {exc}", file=sys.stderr)
        return 1

    status = {"true": True, "false": False, "all": None}[args.status]
    try:
        return asyncio.run(_run_with_engine(environment, args.merchant_key, status))
    except EngineError as exc:
        print(f"zainpay: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())