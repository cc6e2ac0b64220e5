from __future__ import annotations

import json
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Callable

import httpx
from loguru import logger

from brave_search_toolkit.formatting import format_news_results, format_web_results
from brave_search_toolkit.tool import ToolResult

BASE_URL = "https://api.search.brave.com/res/v1"
API_KEY_ENV_VAR = "BRAVE_SEARCH_API_KEY"
DEFAULT_COUNT = 5
MAX_COUNT = 20
DEFAULT_TIMEOUT_SECONDS = 15.0

_MAX_ERROR_BODY_CHARS = 500
_ERROR_BODY_KEYS = ("detail", "message", "error")

QUERY_REQUIRED_MESSAGE = "Search query is required."
API_KEY_MISSING_MESSAGE = (
    f"{API_KEY_ENV_VAR} is not configured. Set it in your environment or .env file."
)


@dataclass(frozen=True)
class SearchQuery:
    query: str
    count: int = DEFAULT_COUNT
    country: str | None = None
    search_lang: str | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"q": self.query, "count": min(self.count, MAX_COUNT)}
        if self.country:
            params["country"] = self.country
        if self.search_lang:
            params["search_lang"] = self.search_lang
        return params


def _coerce_count(value: Any) -> int:
    if value is None or value == "":
        return DEFAULT_COUNT
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Ignoring unusable count {value!r}, using {DEFAULT_COUNT}")
        return DEFAULT_COUNT


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _pick_detail(decoded: dict[str, Any]) -> Any:
    for key in _ERROR_BODY_KEYS:
        value = decoded.get(key)
        if value is not None:
            return value
    return None


def extract_error_body(response: httpx.Response) -> str:
    """Best-effort human-readable detail from an error response body."""
    try:
        body = response.text
    except Exception as ex:
        return str(ex)

    try:
        decoded = json.loads(body)
    except ValueError:
        decoded = None

    if not isinstance(decoded, dict):
        return body[:_MAX_ERROR_BODY_CHARS]

    detail = _pick_detail(decoded)
    if detail is None:
        return body
    # Brave nests the useful part: {"error": {"detail": ..., "code": ...}}
    if isinstance(detail, dict):
        nested = _pick_detail(detail)
        if nested is not None:
            detail = nested
    if isinstance(detail, str):
        return detail
    return json.dumps(detail, ensure_ascii=False)


class SearchExecutor:
    def __init__(
        self,
        api_key_resolver: Callable[[], str],
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._resolve_api_key = api_key_resolver
        self._http_client = http_client
        self._timeout = timeout

    async def execute_web_search(self, tool_input: dict[str, Any]) -> ToolResult:
        query = str(tool_input.get("query") or "")
        if not query:
            return ToolResult.error(QUERY_REQUIRED_MESSAGE)

        api_key = self._resolve_api_key()
        if not api_key:
            return ToolResult.error(API_KEY_MISSING_MESSAGE)

        search = SearchQuery(
            query=query,
            count=_coerce_count(tool_input.get("count")),
            country=_optional_str(tool_input.get("country")),
            search_lang=_optional_str(tool_input.get("search_lang")),
        )
        return await self._run("web", "/web/search", search, api_key, format_web_results)

    async def execute_news_search(self, tool_input: dict[str, Any]) -> ToolResult:
        query = str(tool_input.get("query") or "")
        if not query:
            return ToolResult.error(QUERY_REQUIRED_MESSAGE)

        api_key = self._resolve_api_key()
        if not api_key:
            return ToolResult.error(API_KEY_MISSING_MESSAGE)

        search = SearchQuery(query=query, count=_coerce_count(tool_input.get("count")))
        return await self._run("news", "/news/search", search, api_key, format_news_results)

    async def _run(
        self,
        kind: str,
        path: str,
        search: SearchQuery,
        api_key: str,
        formatter: Callable[[dict[str, Any]], str],
    ) -> ToolResult:
        params = search.to_params()
        logger.debug(f"Brave {kind} search: q={search.query!r} count={params['count']}")

        try:
            async with self._client() as client:
                response = await client.get(
                    BASE_URL + path,
                    headers=self._headers(api_key),
                    params=params,
                )
            response.raise_for_status()

            data = response.json()
            if not isinstance(data, dict):
                raise ValueError(f"Unexpected response payload of type {type(data).__name__}")

            return ToolResult.success(formatter(data))
        except httpx.HTTPStatusError as ex:
            status = ex.response.status_code
            body = extract_error_body(ex.response)
            logger.warning(f"Brave {kind} search returned HTTP {status}: {body}")
            return ToolResult.error(f"Brave {kind} search failed (HTTP {status}): {body}")
        except Exception as ex:
            message = str(ex) or type(ex).__name__
            logger.warning(f"Brave {kind} search failed: {message}")
            return ToolResult.error(f"Brave {kind} search failed: {message}")

    @staticmethod
    def _headers(api_key: str) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "X-Subscription-Token": api_key,
        }

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            yield client
