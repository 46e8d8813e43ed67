class SerpScrapeError(Exception):
    """Base exception for all serpscrape errors."""
    pass

class RequestError(SerpScrapeError):
    """Raised when the search request fails before a 200 response is decoded."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

class ConfigurationError(SerpScrapeError):
    """Raised for configuration-related issues."""
    pass
