import argparse
import asyncio
import sys

from dotenv import load_dotenv

from brave_search_toolkit.app_config import load_json_config, parse_app_config, resolve_runtime_env
from brave_search_toolkit.logging_config import setup_logging
from brave_search_toolkit.toolkit import NEWS_SEARCH_TOOL_NAME, WEB_SEARCH_TOOL_NAME, BraveSearchToolkit

_TOOL_BY_COMMAND = {
    "web": WEB_SEARCH_TOOL_NAME,
    "news": NEWS_SEARCH_TOOL_NAME,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="brave_search_toolkit", description="Run a Brave search tool once.")
    parser.add_argument("command", choices=sorted(_TOOL_BY_COMMAND))
    parser.add_argument("query")
    parser.add_argument("--count", type=int)
    parser.add_argument("--country", help="web only")
    parser.add_argument("--search-lang", dest="search_lang", help="web only")
    return parser


def build_tool_input(args: argparse.Namespace) -> dict:
    tool_input: dict = {"query": args.query}
    if args.count is not None:
        tool_input["count"] = args.count
    if args.command == "web":
        if args.country:
            tool_input["country"] = args.country
        if args.search_lang:
            tool_input["search_lang"] = args.search_lang
    return tool_input


async def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    args = build_parser().parse_args(argv)
    app = parse_app_config(load_json_config())
    setup_logging(level=app.log_level, log_file=app.log_file)

    env = resolve_runtime_env()
    toolkit = BraveSearchToolkit(api_key=env.brave_search_api_key, timeout=app.timeout_seconds)

    result = await toolkit.execute(_TOOL_BY_COMMAND[args.command], build_tool_input(args))
    if result.is_error:
        print(result.content, file=sys.stderr)
        return 1

    print(result.content)
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
