"""
Models for the IMDb list export and the entity handed to the sync process.

Includes:
- ImdbListItem: one CSV row of /list/{id}/export, keys normalised to snake_case
- ImdbList: the parsed list (name, watchlist flag, Trakt slug, ordered items)
- ImdbConfig: base path + watchlist id injected by the caller

"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, TypedDict

# GET /list/{id}/export (one row); every value is the raw CSV cell
class ImdbListItem(TypedDict, total=False):
    position: str
    const: str               # title id, e.g. tt0111161
    created: str
    modified: str
    description: str
    title: str
    url: str
    title_type: str          # movie, tvSeries, tvEpisode...
    imdb_rating: str
    runtime_mins: str
    year: str
    genres: str              # comma string
    num_votes: str
    release_date: str
    directors: str           # comma string


@dataclass(frozen=True)
class ImdbList:
    list_id: str
    list_name: str
    is_watchlist: bool
    trakt_list_slug: str
    list_items: Tuple[ImdbListItem, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "list_id": self.list_id,
            "list_name": self.list_name,
            "is_watchlist": self.is_watchlist,
            "trakt_list_slug": self.trakt_list_slug,
            "list_items": [dict(item) for item in self.list_items],
        }


@dataclass(frozen=True)
class ImdbConfig:
    base_path: str
    watchlist_id: Optional[str] = None
