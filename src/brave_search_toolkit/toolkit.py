from __future__ import annotations

import os
from typing import Any

import httpx
from loguru import logger

from brave_search_toolkit.function_tool import FunctionTool
from brave_search_toolkit.parameters import NumberParameter, StringParameter
from brave_search_toolkit.search_executor import (
    API_KEY_ENV_VAR,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_COUNT,
    SearchExecutor,
)
from brave_search_toolkit.tool import ToolResult

WEB_SEARCH_TOOL_NAME = "brave_search"
NEWS_SEARCH_TOOL_NAME = "brave_news"

_GUIDELINES = f"""\
<BRAVE-SEARCH-GUIDELINES>
- Use {WEB_SEARCH_TOOL_NAME} for general web searches: current events, technical docs, how-to, factual questions.
- Use {NEWS_SEARCH_TOOL_NAME} for recent news and time-sensitive topics.
- Keep queries concise and specific for better results.
- Always cite URLs from the results when referencing information.
- Do not use these tools to search for harmful, illegal, or privacy-violating content.
</BRAVE-SEARCH-GUIDELINES>"""


class BraveSearchToolkit:
    """Web and news search tools backed by the Brave Search API.

    An explicit ``api_key`` always wins. Without one, the key is looked up in
    ``BRAVE_SEARCH_API_KEY`` on every call, so a credential saved into the
    environment after construction is used on the next invocation.
    """

    def __init__(
        self,
        api_key: str = "",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._api_key = api_key or ""
        self._executor = SearchExecutor(self.resolve_api_key, http_client, timeout)
        self._tools = [self._web_search_tool(), self._news_search_tool()]

    @classmethod
    def from_env(cls, **kwargs: Any) -> BraveSearchToolkit:
        api_key = os.environ.get(API_KEY_ENV_VAR, "")
        if not api_key:
            logger.info(f"{API_KEY_ENV_VAR} not set; search tools will report an error until it is")
        return cls(api_key=api_key, **kwargs)

    def resolve_api_key(self) -> str:
        if self._api_key:
            return self._api_key
        return os.environ.get(API_KEY_ENV_VAR, "")

    def tools(self) -> list[FunctionTool]:
        return list(self._tools)

    def get_tool(self, name: str) -> FunctionTool | None:
        for tool in self._tools:
            if tool.name == name:
                return tool
        return None

    def guidelines(self) -> str:
        return _GUIDELINES

    async def execute(self, name: str, tool_input: dict[str, Any]) -> ToolResult:
        tool = self.get_tool(name)
        if tool is None:
            return ToolResult.error(f"Unknown tool: {name}")
        return await tool.execute(tool_input)

    def _web_search_tool(self) -> FunctionTool:
        return FunctionTool(
            name=WEB_SEARCH_TOOL_NAME,
            description="Search the web using Brave Search. Returns titles, URLs, and descriptions.",
            parameters=[
                StringParameter("query", "The search query"),
                _count_parameter(),
                StringParameter("country", "Country code for results (e.g. us, gb, de)", required=False),
                StringParameter("search_lang", "Language code for results (e.g. en, fr, es)", required=False),
            ],
            callback=self._executor.execute_web_search,
        )

    def _news_search_tool(self) -> FunctionTool:
        return FunctionTool(
            name=NEWS_SEARCH_TOOL_NAME,
            description=(
                "Search for recent news articles using Brave Search. "
                "Returns titles, URLs, descriptions, and publication age."
            ),
            parameters=[
                StringParameter("query", "The news search query"),
                _count_parameter(),
            ],
            callback=self._executor.execute_news_search,
        )


def _count_parameter() -> NumberParameter:
    return NumberParameter(
        "count",
        f"Number of results to return (1-{MAX_COUNT})",
        required=False,
        integer=True,
        minimum=1,
        maximum=MAX_COUNT,
    )
