from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag
from pydantic import BaseModel, ConfigDict, Field

class ResultLayout(BaseModel):
    """CSS selectors describing one known markup variant of a result page."""
    model_config = ConfigDict(frozen=True)

    name: str
    block: str = Field(description="Selector of a single result block")
    titles: Tuple[str, ...] = Field(default=(), description="Selectors of the title element inside a block")
    snippets: Tuple[str, ...] = Field(default=(), description="Selectors of the snippet element inside a block")
    link: str = "a[href]"

DEFAULT_LAYOUTS: Tuple[ResultLayout, ...] = (
    ResultLayout(name="desktop", block="div.g", titles=("h3",), snippets=("div.VwiC3b",)),
    ResultLayout(name="basic_html", block="div.ezO2md", titles=("span.CVA68e",), snippets=("span.FrIlee",)),
    ResultLayout(name="container", block="div.MjjYud", titles=("h3",), snippets=("div.VwiC3b", "div.s")),
)

def _union(selectors: List[str]) -> str:
    unique: List[str] = []
    for selector in selectors:
        if selector not in unique:
            unique.append(selector)
    return ", ".join(unique)

class BlockLocator:
    """
    Finds result blocks and their parts across every registered layout.

    Selectors of all layouts are joined into one selector group per part, so
    blocks are visited in document order whatever layout they belong to, and
    a title or snippet is found even when a page mixes layouts.
    """

    def __init__(self, layouts: Tuple[ResultLayout, ...] = DEFAULT_LAYOUTS):
        if not layouts:
            raise ValueError("BlockLocator needs at least one layout")
        self.layouts = tuple(layouts)
        self.block_selector = _union([layout.block for layout in self.layouts])
        self.link_selector = _union([layout.link for layout in self.layouts])
        self.title_selector = _union([s for layout in self.layouts for s in layout.titles])
        self.snippet_selector = _union([s for layout in self.layouts for s in layout.snippets])

    def with_layout(self, layout: ResultLayout) -> "BlockLocator":
        return BlockLocator(self.layouts + (layout,))

    def blocks(self, soup: BeautifulSoup) -> List[Tag]:
        return soup.select(self.block_selector)

    def link(self, block: Tag) -> Optional[Tag]:
        return block.select_one(self.link_selector)

    def title(self, block: Tag) -> Optional[Tag]:
        if not self.title_selector: return None
        return block.select_one(self.title_selector)

    def snippet(self, block: Tag) -> Optional[Tag]:
        if not self.snippet_selector: return None
        return block.select_one(self.snippet_selector)

default_locator = BlockLocator()
