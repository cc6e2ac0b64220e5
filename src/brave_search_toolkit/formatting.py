import json
from typing import Any

from brave_search_toolkit.snippet import clean_snippet

NO_WEB_RESULTS_MESSAGE = "No results found."
NO_NEWS_RESULTS_MESSAGE = "No news results found."


def _field(item: dict[str, Any], key: str) -> str:
    value = item.get(key)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _encode(payload: dict[str, Any], pretty: bool = True) -> str:
    # allow_nan=False: refuse to emit anything that is not strict JSON
    return json.dumps(payload, indent=4 if pretty else None, ensure_ascii=False, allow_nan=False)


def _empty(message: str) -> str:
    return _encode({"results": [], "message": message}, pretty=False)


def format_web_results(data: dict[str, Any]) -> str:
    """Format a web search response. Results live under ``web.results``."""
    results = (data.get("web") or {}).get("results") or []
    if not results:
        return _empty(NO_WEB_RESULTS_MESSAGE)

    formatted = [
        {
            "title": _field(r, "title"),
            "url": _field(r, "url"),
            "description": clean_snippet(_field(r, "description")),
        }
        for r in results
    ]
    return _encode({"results": formatted})


def format_news_results(data: dict[str, Any]) -> str:
    """Format a news search response. Results live at the top-level ``results``."""
    results = data.get("results") or []
    if not results:
        return _empty(NO_NEWS_RESULTS_MESSAGE)

    formatted = [
        {
            "title": _field(r, "title"),
            "url": _field(r, "url"),
            "description": clean_snippet(_field(r, "description")),
            "age": _field(r, "age"),
        }
        for r in results
    ]
    return _encode({"results": formatted})
