from typing import List, Optional, Set
from urllib.parse import unquote

from bs4 import BeautifulSoup

from serpscrape.logger import logger
from serpscrape.schema import SearchResult
from serpscrape.search.layouts import BlockLocator, default_locator

REDIRECT_PREFIX = "/url?q="

def decode_url(raw_url: str) -> str:
    """
    Resolves the destination of a result link.

    Redirect-wrapper links (`/url?q=<target>&sa=...`) lose the prefix and the
    tracking parameters after the first '&' before being percent-decoded.
    Invalid percent escapes are kept as they are.
    """
    if raw_url.startswith(REDIRECT_PREFIX):
        raw_url = raw_url[len(REDIRECT_PREFIX):].split("&", 1)[0]
    try:
        return unquote(raw_url, errors="strict")
    except UnicodeDecodeError:
        return raw_url

def extract(html: str, unique: bool = False, locator: Optional[BlockLocator] = None) -> List[SearchResult]:
    """Parses a result page into its ordered organic results. Never raises on bad markup."""
    locator = locator or default_locator
    soup = BeautifulSoup(html or "", "html.parser")
    results: List[SearchResult] = []
    seen_urls: Set[str] = set()

    blocks = locator.blocks(soup)
    for block in blocks:
        link = locator.link(block)
        title = locator.title(block)
        if link is None or title is None:
            continue

        raw_url = link.get("href")
        if not raw_url:
            continue

        url = decode_url(raw_url)
        if unique and url in seen_urls:
            continue
        seen_urls.add(url)

        if not url.startswith("http"):
            continue

        snippet = locator.snippet(block)
        results.append(
            SearchResult(
                url=url,
                title=title.get_text().strip(),
                description=snippet.get_text().strip() if snippet is not None else "",
            )
        )

    logger.debug(f"Extracted {len(results)} results from {len(blocks)} candidate blocks (unique={unique}).")
    return results
