import asyncio
import os
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from brave_search_toolkit.__main__ import build_parser, build_tool_input, main
from brave_search_toolkit.tool import ToolResult


class TestCommandLine(unittest.TestCase):
    def test_web_input(self) -> None:
        args = build_parser().parse_args(["web", "python", "--count", "3", "--country", "gb", "--search-lang", "en"])

        self.assertEqual(
            build_tool_input(args),
            {"query": "python", "count": 3, "country": "gb", "search_lang": "en"},
        )

    def test_news_input_drops_web_only_options(self) -> None:
        args = build_parser().parse_args(["news", "python", "--country", "gb"])

        self.assertEqual(build_tool_input(args), {"query": "python"})

    @patch("brave_search_toolkit.__main__.setup_logging")
    @patch("brave_search_toolkit.__main__.load_json_config", return_value={})
    @patch("brave_search_toolkit.__main__.load_dotenv")
    @patch("brave_search_toolkit.__main__.BraveSearchToolkit")
    def test_main_success(self, mock_toolkit_cls: MagicMock, *_: MagicMock) -> None:
        toolkit = MagicMock()
        toolkit.execute = AsyncMock(return_value=ToolResult.success('{"results": []}'))
        mock_toolkit_cls.return_value = toolkit

        with patch.dict(os.environ, {"BRAVE_SEARCH_API_KEY": "k"}):
            exit_code = asyncio.run(main(["news", "markets"]))

        self.assertEqual(exit_code, 0)
        toolkit.execute.assert_awaited_once_with("brave_news", {"query": "markets"})
        self.assertEqual(mock_toolkit_cls.call_args.kwargs["api_key"], "k")

    @patch("brave_search_toolkit.__main__.setup_logging")
    @patch("brave_search_toolkit.__main__.load_json_config", return_value={})
    @patch("brave_search_toolkit.__main__.load_dotenv")
    def test_main_missing_key_fails(self, *_: MagicMock) -> None:
        env = {k: v for k, v in os.environ.items() if k != "BRAVE_SEARCH_API_KEY"}

        with patch.dict(os.environ, env, clear=True):
            exit_code = asyncio.run(main(["web", "python"]))

        self.assertEqual(exit_code, 1)


if __name__ == "__main__":
    unittest.main()
