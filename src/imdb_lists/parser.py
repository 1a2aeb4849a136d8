"""
Turn a /list/{id}/export response (headers + CSV body) into an ImdbList.

IMDb does not return the list name in the CSV; it only shows up in the
attachment filename of the Content-Disposition header. That quirk is confined
to `parse_content_disposition`.
"""
from __future__ import annotations
import csv, io, re
from typing import List, Mapping, Optional

from .models import ImdbList, ImdbListItem
from .utils import WATCHLIST_NAME, WATCHLIST_SLUG, normalize_column, slugify

CONTENT_DISPOSITION = "Content-Disposition"
CONTENT_DISPOSITION_RE = re.compile(r'^\s*attachment\s*;\s*filename\s*=\s*"(?P<name>.+)\.csv"\s*$', re.IGNORECASE)


class ListParseError(ValueError):
    """The export response could not be turned into a list (bad header or CSV)."""


def parse_content_disposition(value: Optional[str]) -> str:
    """Return the list name from 'attachment; filename="<name>.csv"'."""
    if not value:
        raise ListParseError(f"missing {CONTENT_DISPOSITION} header")
    m = CONTENT_DISPOSITION_RE.match(value)
    if m is None:
        raise ListParseError(f"malformed {CONTENT_DISPOSITION} header: {value!r}")
    return m.group("name")


def parse_list_items(body: bytes) -> List[ImdbListItem]:
    """
    Parse the CSV export: the first row names the columns, every following
    row becomes one item (in file order). Blank lines are skipped.
    Any decoding problem or ragged row fails the whole parse.
    """
    try:
        text = body.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ListParseError(f"list export is not valid UTF-8: {e}") from e

    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    items: List[ImdbListItem] = []
    try:
        header = next((row for row in reader if row), None)
        if not header or not any(cell.strip() for cell in header):
            raise ListParseError("list export has no header row")
        keys = [normalize_column(cell) for cell in header]
        dupes = sorted({k for k in keys if keys.count(k) > 1})
        if dupes:
            raise ListParseError(f"duplicate columns in header: {dupes}")

        for row in reader:
            if not row:
                continue
            if len(row) != len(keys):
                raise ListParseError(
                    f"line {reader.line_num}: expected {len(keys)} columns, got {len(row)}"
                )
            items.append(dict(zip(keys, row)))  # type: ignore[arg-type]
    except csv.Error as e:
        raise ListParseError(f"line {reader.line_num}: {e}") from e
    return items


def build_list(list_id: str, headers: Mapping[str, str], body: bytes) -> ImdbList:
    """
    Assemble the ImdbList for `list_id` from an export response.
    `headers` must do case-insensitive lookups (httpx.Headers does).
    """
    list_name = parse_content_disposition(headers.get(CONTENT_DISPOSITION))
    is_watchlist = list_name == WATCHLIST_NAME
    if is_watchlist:
        slug = WATCHLIST_SLUG
    else:
        slug = slugify(list_name) or list_id.lower()

    items = parse_list_items(body)
    return ImdbList(
        list_id=list_id,
        list_name=list_name,
        is_watchlist=is_watchlist,
        trakt_list_slug=slug,
        list_items=tuple(items),
    )
