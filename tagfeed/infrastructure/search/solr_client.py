"""Solr search engine client over the /select HTTP API.

All HTTP calls use httpx.AsyncClient so they do not block the event loop.
Library and backend errors are translated to SearchException.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from tagfeed.domain.entities import SearchHit
from tagfeed.domain.exceptions import SearchException
from tagfeed.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


def _error_message(payload: Any) -> str | None:
    """Return the message of a Solr error body, if the payload is one."""
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        error = payload["error"]
        return str(error.get("msg") or error.get("code") or "unknown Solr error")
    return None


class SolrSearchEngine:
    """ISearchEngine implementation for a single Solr core.

    Args:
        client: Shared httpx.AsyncClient (owned by the app lifespan).
        base_url: Core URL, e.g. http://localhost:8983/solr/sakai.
        page_size: Rows per request when every hit is requested.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str, page_size: int = 100) -> None:
        self._http = client
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size

    async def _select(self, query: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/select"
        try:
            resp = await self._http.get(url, params={"q": query, "wt": "json", **params})
        except httpx.HTTPError as e:
            logger.warning("Solr request failed: %s", e)
            raise SearchException(query, f"{type(e).__name__}: {e}") from e
        try:
            payload = resp.json()
        except (json.JSONDecodeError, ValueError) as e:
            if resp.status_code >= 400:
                raise SearchException(query, f"HTTP {resp.status_code}") from e
            raise SearchException(query, "Solr returned a non-JSON body") from e
        message = _error_message(payload)
        if message is not None or resp.status_code >= 400:
            raise SearchException(query, message or f"HTTP {resp.status_code}")
        response = payload.get("response") if isinstance(payload, dict) else None
        if not isinstance(response, dict):
            raise SearchException(query, "Solr response has no 'response' section")
        return response

    @traced("search.query")
    async def search(
        self,
        query: str,
        sort: str | None = None,
        limit: int | None = None,
    ) -> list[SearchHit]:
        """Run query; return up to limit hits, or every hit when limit is None."""
        params: dict[str, Any] = {}
        if sort:
            params["sort"] = sort
        if limit is not None:
            response = await self._select(query, {**params, "start": 0, "rows": limit})
            return [SearchHit(doc) for doc in response.get("docs", [])]

        hits: list[SearchHit] = []
        start = 0
        while True:
            response = await self._select(
                query, {**params, "start": start, "rows": self.page_size}
            )
            docs = response.get("docs", [])
            hits.extend(SearchHit(doc) for doc in docs)
            start += len(docs)
            if not docs or start >= int(response.get("numFound", 0)):
                break
        logger.debug("Query %r returned %d hits", query, len(hits))
        return hits

    async def ping(self) -> bool:
        """Return True when the core's ping handler reports OK."""
        try:
            resp = await self._http.get(
                f"{self.base_url}/admin/ping", params={"wt": "json"}
            )
            return resp.status_code == 200 and resp.json().get("status") == "OK"
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Solr ping failed: %s", e)
            return False
