from typing import Any, List
from pydantic import BaseModel, ConfigDict

from serpscrape.schema import SearchResult

class WebSearchEngine(BaseModel):
    """Base class for web search engines."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    engine_name: str = "Unknown"

    async def perform_search(
        self,
        query: str,
        num_results: int = 10,
        **kwargs: Any # Engine-specific params like lang, region, start
    ) -> List[SearchResult]:
        """
        Perform a web search and return a list of search results.
        Args:
            query (str): The search query to submit to the search engine.
            num_results (int, optional): The number of search results wanted. Default is 10.
            kwargs: Additional keyword arguments specific to the search engine.
        Returns:
            List[SearchResult]: Results in the order the engine ranked them.
        """
        raise NotImplementedError
