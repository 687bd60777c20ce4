from typing import Callable

from web_scraping.scrape.fetcher import PageFetcher
from web_scraping.scrape.platforms import DEFAULT_REGISTRY, PlatformRegistry
from web_scraping.scrape.upsert_product import ProductGateway

from .config import get_settings
from .supabase_client import get_supabase


def get_registry() -> PlatformRegistry:
    return DEFAULT_REGISTRY


def get_fetcher() -> PageFetcher:
    settings = get_settings()
    return PageFetcher(
        timeout_ms=settings.nav_timeout_ms,
        settle_timeout_ms=settings.settle_timeout_ms,
    )


def _build_gateway() -> ProductGateway:
    return ProductGateway(get_supabase())


def get_gateway_factory() -> Callable[[], ProductGateway]:
    # the client is only built once the route has accepted the platform key
    return _build_gateway
