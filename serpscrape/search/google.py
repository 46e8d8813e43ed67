from typing import Any, List, Optional

import httpx

from serpscrape.config import config
from serpscrape.logger import logger
from serpscrape.schema import SearchOptions, SearchResult
from serpscrape.search.base import WebSearchEngine
from serpscrape.search.extractor import extract
from serpscrape.search.request import execute

async def search(
    term: str,
    options: Optional[SearchOptions] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[SearchResult]:
    """
    Runs one Google query and returns its organic results in page order.

    Raises RequestError when the page cannot be fetched. A page whose markup
    is not understood yields an empty list rather than an error.
    """
    if options is None:
        options = config.search.to_options()

    html = await execute(term, options, transport=transport)
    results = extract(html, unique=options.unique)
    if len(results) > options.requested_count:
        logger.debug(f"Trimming {len(results)} results to the requested {options.requested_count}.")
        results = results[:options.requested_count]

    logger.info(f"Search for '{term}' returned {len(results)} results.")
    return results

class GoogleSearchEngine(WebSearchEngine):
    engine_name: str = "GoogleScraper"

    async def perform_search(
        self,
        query: str,
        num_results: int = 10,
        **kwargs: Any
    ) -> List[SearchResult]:
        transport = kwargs.pop("transport", None)
        defaults = config.search.model_dump()
        options = SearchOptions(**{**defaults, **kwargs, "num_results": num_results})
        return await search(query, options, transport=transport)
