from typing import List

from pydantic import BaseModel

# The scrape result/product models live with the scraper; re-exported for the API layer.
from web_scraping.scrape.schema import Product, RawItem, ScrapeResult  # noqa: F401


class ErrorResponse(BaseModel):
    error: str


class PlatformInfo(BaseModel):
    key: str
    url: str


class PlatformList(BaseModel):
    platforms: List[PlatformInfo]
