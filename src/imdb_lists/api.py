"""
Sync API wrapper around the IMDb list export endpoint.

Provides:
- Fetching any list by id (`list_get`)
- Fetching the configured watchlist (`watchlist_get`)

The executor in `http_client` only classifies transport outcomes; deciding
that a 404 means "this list does not exist" happens here.
"""
from __future__ import annotations
import logging
from typing import Optional

import httpx

from http_client import (
    ForbiddenHTTPError,
    HttpClient,
    RequestFields,
    TransportHTTPError,
    UnexpectedStatusHTTPError,
)

from .models import ImdbConfig, ImdbList
from .parser import ListParseError, build_list
from .utils import export_endpoint

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A list could not be fetched. `status_code` is None when no response arrived."""

    def __init__(self, list_id: str, status_code: Optional[int], message: str):
        self.list_id = list_id
        self.status_code = status_code
        super().__init__(message)

    @property
    def not_found(self) -> bool:
        return self.status_code == 404

    @property
    def transport(self) -> bool:
        return self.status_code is None


class ImdbAPI:

    def __init__(self, http: HttpClient, config: ImdbConfig):
        self.http = http
        self.config = config

    def list_get(self, list_id: str) -> ImdbList:
        return self._list_export(list_id)

    def watchlist_get(self) -> ImdbList:
        if not self.config.watchlist_id:
            raise ValueError("no watchlist id configured")
        return self._list_export(self.config.watchlist_id)

    def _list_export(self, list_id: str) -> ImdbList:
        fields = RequestFields(
            method="GET",
            base_path=self.config.base_path,
            endpoint=export_endpoint(list_id),
        )
        try:
            resp = self.http.request(fields)
        except TransportHTTPError as e:
            raise ApiError(list_id, None, f"request for list {list_id} failed: {e}") from e
        except ForbiddenHTTPError as e:
            raise ApiError(list_id, e.status_code, f"list {list_id} is forbidden") from e
        except UnexpectedStatusHTTPError as e:
            raise ApiError(list_id, e.status_code, f"list {list_id}: unexpected status code: {e.status_code}") from e

        try:
            if resp.status_code == 404:
                logger.warning("list %s could not be found", list_id)
                raise ApiError(list_id, 404, f"list {list_id} could not be found")
            try:
                body = resp.read()
            except httpx.DecodingError as e:
                raise ListParseError(f"list {list_id}: body could not be decoded: {e}") from e
            except httpx.TransportError as e:
                raise ApiError(list_id, None, f"reading list {list_id} failed: {e}") from e
            imdb_list = build_list(list_id, resp.headers, body)
        finally:
            resp.close()

        logger.info("fetched list %s (%r): %d item(s)", list_id, imdb_list.list_name, len(imdb_list.list_items))
        return imdb_list
