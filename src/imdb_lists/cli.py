"""
Command-line entrypoint for fetching IMDb lists.

- Parses CLI args and config
- Initializes HttpClient and ImdbAPI
- Fetches the watchlist (when configured) and every list id, one at a time
- Prints a summary per list, or the lists as JSON with --json

Lists that could not be found (the watchlist included) are skipped; any other failure aborts with exit code 2.
"""
from __future__ import annotations
import json, logging, sys
from functools import partial
from typing import List, Optional, Sequence

from http_client import HttpClient

from .api import ApiError, ImdbAPI
from .config import imdb_config, parse_args
from .models import ImdbList
from .parser import ListParseError

def run(args) -> List[ImdbList]:
    config = imdb_config(args)
    with HttpClient(connect_timeout=args.connect_timeout, read_timeout=args.read_timeout) as http:
        api = ImdbAPI(http, config)
        print(f"""
            ====== IMDb lists ======
            Base URL       : {config.base_path}
            Watchlist      : {config.watchlist_id or '-'}
            Lists          : {', '.join(args.list_ids) or '-'}
            Timeouts (s)   : connect={args.connect_timeout} read={args.read_timeout}
            ========================
        """, file=sys.stderr)
        lists: List[ImdbList] = []
        fetches = [api.watchlist_get] if config.watchlist_id else []
        fetches += [partial(api.list_get, list_id) for list_id in args.list_ids]
        for fetch in fetches:
            try:
                lists.append(fetch())
            except ApiError as e:
                if not e.not_found:
                    raise
                print(f"[skip] {e}", file=sys.stderr)
    return lists

def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        lists = run(args)
    except (ApiError, ListParseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
        sys.exit(130)

    if args.json:
        json.dump([imdb_list.to_dict() for imdb_list in lists], sys.stdout, indent=2)
        print()
        return
    for imdb_list in lists:
        kind = "watchlist" if imdb_list.is_watchlist else "list"
        print(f"{imdb_list.list_id}  {kind:<9}  {imdb_list.trakt_list_slug:<30}  {len(imdb_list.list_items)} item(s)  {imdb_list.list_name}")
