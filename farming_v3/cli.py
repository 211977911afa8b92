"""
Command line access to the Farming V3 query functions

    farming-v3 pool 0x...
    farming-v3 farmings
    farming-v3 ticks 0x... --lower -1200 --upper 1200 --all

Results are printed as JSON.
"""
import argparse
import dataclasses
import json
import logging
import sys
from typing import List, Optional

from .config import settings
from .constants import MIN_TICK, MAX_TICK
from .data import farming
from .data.graph_client import GraphClientError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _to_jsonable(value):
    if dataclasses.is_dataclass(value):
        return dataclasses.asdict(value)
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    return value


def _ticks(args):
    if args.all:
        result = farming.get_all_v3_ticks_paginated(args.pool, args.lower, args.upper)
    else:
        result = farming.get_all_v3_ticks(args.pool, args.lower, args.upper, args.skip)
    if result.error is not None:
        logger.warning("Ticks returned with error: %s", result.error)
    return result.data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="farming-v3", description="Query the Farming V3 subgraphs")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=settings.LOG_LEVEL if settings.LOG_LEVEL in LOG_LEVELS else "INFO",
                        help="Logging level (default: LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("pool", help="Pool state")
    p.add_argument("address", type=str)
    p.set_defaults(func=lambda a: farming.get_pool(a.address))

    p = sub.add_parser("token", help="Token")
    p.add_argument("address", type=str)
    p.set_defaults(func=lambda a: farming.get_token(a.address))

    p = sub.add_parser("farmings", help="All attached eternal farmings")
    p.set_defaults(func=lambda a: farming.get_eternal_farmings())

    p = sub.add_parser("farming", help="One eternal farming")
    p.add_argument("farming_id", type=str)
    p.set_defaults(func=lambda a: farming.get_eternal_farming(a.farming_id))

    p = sub.add_parser("pool-farmings", help="Active eternal farmings of a pool")
    p.add_argument("address", type=str)
    p.set_defaults(func=lambda a: farming.get_eternal_farming_from_pool(a.address))

    p = sub.add_parser("positions", help="Positions of an account on the farming center")
    p.add_argument("account", type=str)
    p.set_defaults(func=lambda a: farming.get_transferred_positions(a.account))

    p = sub.add_parser("eternal-positions", help="Positions of an account in eternal farmings")
    p.add_argument("account", type=str)
    p.set_defaults(func=lambda a: farming.get_positions_on_eternal_farming(a.account))

    p = sub.add_parser("pool-positions", help="Positions of an account in one pool")
    p.add_argument("account", type=str)
    p.add_argument("pool_id", type=str)
    p.add_argument("--min-range-length", type=int, default=0)
    p.set_defaults(func=lambda a: farming.get_transferred_positions_for_pool(
        a.account, a.pool_id, a.min_range_length))

    p = sub.add_parser("ticks", help="Initialized ticks of a pool")
    p.add_argument("pool", type=str)
    p.add_argument("--lower", type=int, default=MIN_TICK, help="Lowest tick index (inclusive)")
    p.add_argument("--upper", type=int, default=MAX_TICK, help="Highest tick index (inclusive)")
    p.add_argument("--skip", type=int, default=0, help="Ticks to skip (ignored with --all)")
    p.add_argument("--all", action="store_true", help="Follow pages until the range is exhausted")
    p.set_defaults(func=_ticks)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        result = args.func(args)
    except GraphClientError as e:
        logger.error("%s", e)
        return 1

    print(json.dumps(_to_jsonable(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
