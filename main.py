# File: main.py
import argparse
import asyncio
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from serpscrape.config import config as serpscrape_config
from serpscrape.exceptions import RequestError
from serpscrape.logger import logger, define_log_level
from serpscrape.schema import SearchOptions, SearchResult
from serpscrape.search import search

def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="serpscrape", description="Run a single Google search and print the organic results")
    parser.add_argument("term", help="Search term")
    parser.add_argument("--num", "-n", type=int, dest="num_results", help="Desired number of results (default from config: 10)")
    parser.add_argument("--lang", "-l", help="Interface language, e.g. 'en' or 'de'")
    parser.add_argument("--region", "-r", help="Country code sent as 'gl', e.g. 'us'")
    parser.add_argument("--start", type=int, help="Pagination offset")
    parser.add_argument("--safe", choices=["active", "off"], help="SafeSearch mode")
    parser.add_argument("--timeout", type=int, help="Request timeout in milliseconds")
    parser.add_argument("--proxy", help="Proxy URL, e.g. http://proxy.local:3128")
    parser.add_argument("--unique", action="store_true", default=None, help="Drop results with an already seen URL")
    parser.add_argument("--json", action="store_true", help="Print results as a JSON array")
    parser.add_argument("--log-level", default="WARNING", help="Log level printed to stderr (default: WARNING)")
    return parser.parse_args(argv)

def build_options(args: argparse.Namespace) -> SearchOptions:
    overrides = {
        key: getattr(args, key)
        for key in ("num_results", "lang", "region", "start", "safe", "timeout", "proxy", "unique")
        if getattr(args, key) is not None
    }
    return SearchOptions(**{**serpscrape_config.search.model_dump(), **overrides})

def format_results(results: List[SearchResult], as_json: bool = False) -> str:
    if as_json:
        return json.dumps([result.model_dump() for result in results], indent=2, ensure_ascii=False)
    if not results:
        return "No results."
    lines = []
    for position, result in enumerate(results, start=1):
        lines.append(f"{position}. {result.title or 'No Title'}")
        lines.append(f"   URL: {result.url}")
        if result.description:
            lines.append(f"   Description: {result.description}")
    return "\n".join(lines)

async def run_search(args: argparse.Namespace) -> int:
    try:
        options = build_options(args)
    except ValidationError as ve:
        logger.error(f"serpscrape: Invalid search options: {ve}")
        print(f"error: invalid options: {ve}", file=sys.stderr)
        return 2

    try:
        results = await search(args.term, options)
    except RequestError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    print(format_results(results, as_json=args.json))
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_cli_args(argv)
    define_log_level(print_level=args.log_level.upper(), name="serpscrape_cli")
    try:
        return asyncio.run(run_search(args))
    except KeyboardInterrupt:
        logger.info("serpscrape: Search interrupted by user.")
        return 130

if __name__ == "__main__":
    sys.exit(main())
