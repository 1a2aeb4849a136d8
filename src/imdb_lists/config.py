from __future__ import annotations
import argparse, os
from typing import Optional, Sequence

from .models import ImdbConfig
from .utils import split_ids

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(f"invalid log level {value!r} (choose from {', '.join(LOG_LEVELS)})")
    return level

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Fetch IMDb list exports")
    p.add_argument("--base-url", default=os.getenv("IMDB_BASE_URL", "https://www.imdb.com"))
    p.add_argument("--watchlist-id", default=os.getenv("IMDB_WATCHLIST_ID"))
    p.add_argument("--list-ids", type=split_ids, default=split_ids(os.getenv("IMDB_LIST_IDS")),
                   help="comma separated list ids, e.g. ls123456,ls654321")
    p.add_argument("--connect-timeout", type=float, default=float(os.getenv("CONNECT_TIMEOUT", "5")))
    p.add_argument("--read-timeout", type=float, default=float(os.getenv("READ_TIMEOUT", "30")))
    p.add_argument("--log-level", type=log_level, default=os.getenv("LOG_LEVEL", "INFO"))
    p.add_argument("--json", action="store_true", help="dump fetched lists as JSON to stdout")
    return p

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)

def imdb_config(args: argparse.Namespace) -> ImdbConfig:
    return ImdbConfig(base_path=args.base_url, watchlist_id=args.watchlist_id or None)
