# http_client.py
from __future__ import annotations
import logging, uuid
from dataclasses import dataclass
from typing import Optional, Union
import httpx

logger = logging.getLogger(__name__)

# 404 is passed through: callers decide whether "not found" is an error for their endpoint
PASSTHROUGH_STATUSES = {404}


class HttpClientError(Exception):
    """Base for everything HttpClient.request raises."""


class TransportHTTPError(HttpClientError):
    """Connection refused, timeout, DNS failure... no response was received."""


class StatusHTTPError(HttpClientError):
    reason = "returned"

    def __init__(self, status_code: int, method: str, url: str):
        self.status_code = status_code
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} {self.reason} {status_code}")


class ForbiddenHTTPError(StatusHTTPError):
    reason = "forbidden:"


class UnexpectedStatusHTTPError(StatusHTTPError):
    reason = "unexpected status code:"


@dataclass(frozen=True)
class RequestFields:
    method: str
    base_path: str
    endpoint: str
    body: Optional[Union[bytes, str]] = None
    headers: Optional[dict[str, str]] = None

    @property
    def url(self) -> str:
        return self.base_path.rstrip("/") + self.endpoint


class HttpClient:
    """
    - Reusable sync HTTP client with:
      - one long-lived httpx.Client (connection reuse across calls)
      - httpx timeouts
      - single round-trip per call, no retries
      - 2xx/404 passed through unread, 403 and other statuses raised
    """

    def __init__(
        self,
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        *,
        default_headers: Optional[dict[str, str]] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.timeout = httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=read_timeout,
            pool=read_timeout,
        )
        self.default_headers = {"Accept": "text/csv", **(default_headers or {})}
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.timeout, headers=self.default_headers)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def request(self, fields: RequestFields, *, req_id: Optional[str] = None) -> httpx.Response:
        """
        Issue exactly one request described by `fields`.
        Returns the response unconsumed for 2xx and 404; the caller must read and close it.
        Raises ForbiddenHTTPError on 403, UnexpectedStatusHTTPError on any other status
        and TransportHTTPError when no response arrives.
        Each request tagged with X-Request-Id for traceability.
        """
        req_id = req_id or str(uuid.uuid4())
        headers = dict(fields.headers or {})
        headers.setdefault("X-Request-Id", req_id)

        url = fields.url
        method = fields.method.upper()
        logger.debug("[req#%s] %s %s", req_id, method, url)

        try:
            request = self._client.build_request(method, url, content=fields.body, headers=headers)
            resp = self._client.send(request, stream=True)
        except httpx.TransportError as e:
            logger.error("[req#%s] [network] %s %s failed: %s", req_id, method, url, e)
            raise TransportHTTPError(f"{method} {url} failed: {e}") from e

        status = resp.status_code
        if 200 <= status < 300 or status in PASSTHROUGH_STATUSES:
            return resp

        # Error paths never hand the response out, so release the connection here
        resp.close()
        if status == 403:
            logger.warning("[req#%s] [forbidden] %s %s returned 403", req_id, method, url)
            raise ForbiddenHTTPError(status, method, url)

        logger.warning("[req#%s] [fatal] %s %s returned %s", req_id, method, url, status)
        raise UnexpectedStatusHTTPError(status, method, url)
