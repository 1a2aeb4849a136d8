from __future__ import annotations
from typing import List, Optional
import re, unicodedata

WATCHLIST_NAME = "WATCHLIST"
WATCHLIST_SLUG = "watchlist"
LIST_EXPORT_ENDPOINT = "/list/{list_id}/export"

NON_ALNUM_RUN_RE = re.compile(r"[^a-z0-9]+")

def split_ids(s: Optional[str]) -> List[str]:
    """Split a comma-delimited string into a trimmed list; tolerates None/empty."""
    if not s:
        return []
    return [p.strip() for p in s.split(",") if p.strip()]

def slugify(name: str) -> str:
    """
    Normalise a list name into a Trakt-style slug.
    Accents are folded to ASCII, then every run of non [a-z0-9] becomes a single '-'.
    'Watched (2023)' -> 'watched-2023'. May return '' for names with no latin characters.
    """
    folded = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    return NON_ALNUM_RUN_RE.sub("-", folded.lower()).strip("-")

def normalize_column(header: str) -> str:
    """'Title Type' -> 'title_type', 'Runtime (mins)' -> 'runtime_mins', 'IMDb Rating' -> 'imdb_rating'."""
    return NON_ALNUM_RUN_RE.sub("_", header.strip().lower()).strip("_")

def export_endpoint(list_id: str) -> str:
    return LIST_EXPORT_ENDPOINT.format(list_id=list_id)
