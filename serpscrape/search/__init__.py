from serpscrape.search.base import WebSearchEngine
from serpscrape.search.extractor import decode_url, extract
from serpscrape.search.google import GoogleSearchEngine, search
from serpscrape.search.layouts import DEFAULT_LAYOUTS, BlockLocator, ResultLayout
from serpscrape.search.request import execute

__all__ = [
    "WebSearchEngine",
    "GoogleSearchEngine",
    "search",
    "execute",
    "extract",
    "decode_url",
    "BlockLocator",
    "ResultLayout",
    "DEFAULT_LAYOUTS",
]
