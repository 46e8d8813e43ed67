from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

SafeSearch = Literal["active", "off"]

class SearchOptions(BaseModel):
    """Options recognized by a single search call."""
    model_config = ConfigDict(extra="forbid")

    num_results: int = Field(10, ge=0, description="Desired number of results; the request asks for two more")
    lang: str = Field("en", description="Interface language sent as 'hl'")
    proxy: Optional[str] = Field(None, description="Proxy URL the request is routed through")
    timeout: int = Field(5000, gt=0, description="Request timeout in milliseconds")
    safe: SafeSearch = Field("active", description="SafeSearch mode")
    region: Optional[str] = Field(None, description="Country code sent as 'gl'; omitted when not set")
    start: int = Field(0, ge=0, description="Pagination offset")
    unique: bool = Field(False, description="Drop results whose URL was already seen")

    @property
    def requested_count(self) -> int:
        return self.num_results + 2

class SearchResult(BaseModel):
    """Represents a single organic search result"""
    url: str = Field(description="Absolute destination URL")
    title: str = Field(default="", description="Trimmed title text")
    description: str = Field(default="", description="Trimmed snippet text, empty when the block has none")

    def __str__(self) -> str:
        return f"{self.title} - {self.url}"

class ProxyConfig(BaseModel):
    scheme: Literal["http", "https"]
    host: str
    port: int

    @property
    def url(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host # IPv6 literal
        return f"{self.scheme}://{host}:{self.port}"
