from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode

import httpx

from src.core.config import get_settings
from src.core.errors import UpstreamError


logger = logging.getLogger(__name__)


class SupabaseClient:
    _shared_client: httpx.Client | None = None
    _client_lock: Lock = Lock()

    def __init__(self) -> None:
        settings = get_settings()
        self.base_url = settings.supabase_url.rstrip("/") + "/rest/v1"
        self.api_key = settings.supabase_service_role_key or settings.supabase_anon_key
        if not self.api_key:
            raise ValueError("Supabase API key is required")
        self._client = self._get_shared_client(settings.supabase_timeout_seconds)

    @classmethod
    def _get_shared_client(cls, timeout: float) -> httpx.Client:
        if cls._shared_client is not None:
            return cls._shared_client
        with cls._client_lock:
            if cls._shared_client is None:
                cls._shared_client = httpx.Client(
                    timeout=timeout,
                    limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
                )
        return cls._shared_client

    @classmethod
    def close_shared_client(cls) -> None:
        with cls._client_lock:
            if cls._shared_client is not None:
                cls._shared_client.close()
                cls._shared_client = None

    def _headers(self, **extra: str) -> Dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
        }
        headers.update(extra)
        return headers

    def _send(self, method: str, table: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "store %s %s failed with HTTP %s", method, table, exc.response.status_code
            )
            raise UpstreamError(
                f"Store answered HTTP {exc.response.status_code} for {table}", table=table
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("store %s %s failed: %s", method, table, exc)
            raise UpstreamError(f"Store unreachable while accessing {table}", table=table) from exc
        return response

    def select(
        self,
        table: str,
        select: str,
        filters: Optional[List[Tuple[str, str]]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        order: Optional[str] = None,
        count: bool | str = False,
    ) -> Tuple[List[Dict[str, Any]], Optional[int]]:
        params: List[Tuple[str, str]] = [("select", select)]
        if filters:
            params.extend(filters)
        if limit is not None:
            params.append(("limit", str(limit)))
        if offset is not None:
            params.append(("offset", str(offset)))
        if order:
            params.append(("order", order))

        headers = self._headers()
        if count:
            if count is True:
                headers["Prefer"] = "count=exact"
            elif isinstance(count, str):
                headers["Prefer"] = f"count={count}"

        url = f"{self.base_url}/{table}?{urlencode(params, doseq=True)}"
        response = self._send("GET", table, url, headers=headers)
        total_count = None
        if count and "content-range" in response.headers:
            content_range = response.headers["content-range"]
            total = content_range.rsplit("/", 1)[-1]
            if total.isdigit():
                total_count = int(total)
        try:
            rows = response.json()
        except ValueError as exc:
            raise UpstreamError(f"Store returned malformed JSON for {table}", table=table) from exc
        if not isinstance(rows, list):
            raise UpstreamError(f"Store returned a non-list payload for {table}", table=table)
        return rows, total_count

    def insert(
        self,
        table: str,
        payload: Dict[str, Any] | List[Dict[str, Any]],
        upsert: bool = False,
        on_conflict: Optional[str] = None,
        ignore_duplicates: bool = False,
    ) -> List[Dict[str, Any]]:
        params: List[Tuple[str, str]] = []
        if on_conflict:
            params.append(("on_conflict", on_conflict))
        url = f"{self.base_url}/{table}"
        if params:
            url = f"{url}?{urlencode(params, doseq=True)}"
        headers = self._headers(**{"Content-Type": "application/json"})
        headers["Prefer"] = "return=representation"
        if upsert:
            resolution = "ignore-duplicates" if ignore_duplicates else "merge-duplicates"
            headers["Prefer"] = f"resolution={resolution},return=representation"
        response = self._send("POST", table, url, headers=headers, json=payload)
        if not response.content:
            return []
        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(f"Store returned malformed JSON for {table}", table=table) from exc
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            return [data]
        return []

    def select_all(
        self,
        table: str,
        select: str,
        filters: Optional[List[Tuple[str, str]]] = None,
        order: Optional[str] = None,
        page_size: int = 1000,
    ) -> List[Dict[str, Any]]:
        """Page through a table until the store returns a short page."""
        rows: List[Dict[str, Any]] = []
        offset = 0
        while True:
            page, _ = self.select(
                table=table,
                select=select,
                filters=filters,
                limit=page_size,
                offset=offset,
                order=order,
            )
            rows.extend(page)
            if len(page) < page_size:
                return rows
            offset += page_size

    def count(self, table: str, filters: Optional[List[Tuple[str, str]]] = None, select: str = "id") -> int:
        _, total = self.select(table=table, select=select, filters=filters, limit=1, count="exact")
        if total is None:
            raise UpstreamError(f"Store returned no row count for {table}", table=table)
        return total
