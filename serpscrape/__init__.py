# Python version check: 3.11+
import sys

if sys.version_info < (3, 11):
    print(
        "Warning: Unsupported Python version {ver}, please use Python 3.11 or newer. serpscrape relies on tomllib.".format(
            ver=".".join(map(str, sys.version_info[:3]))
        )
    )

from serpscrape.exceptions import ConfigurationError, RequestError, SerpScrapeError
from serpscrape.schema import SearchOptions, SearchResult
from serpscrape.search import GoogleSearchEngine, search

__version__ = "0.1.0"

__all__ = [
    "search",
    "GoogleSearchEngine",
    "SearchOptions",
    "SearchResult",
    "RequestError",
    "SerpScrapeError",
    "ConfigurationError",
]
