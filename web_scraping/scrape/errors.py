class ScrapeError(Exception):
    """Base class for failures of a scrape cycle."""


class UnknownPlatform(ScrapeError):
    def __init__(self, key: str):
        super().__init__("Platform not supported")
        self.key = key


class NavigationFailure(ScrapeError):
    """The target page could not be loaded (timeout or network error)."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Navigation to {url} failed: {reason}")
        self.url = url
        self.reason = reason
