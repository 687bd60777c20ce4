import argparse
import asyncio
import logging
import sys
from typing import Optional

import orjson

from .extractor import extract_items
from .fetcher import PageFetcher
from .normalizer import filter_deals
from .platforms import DEFAULT_REGISTRY, PlatformRegistry
from .schema import ScrapeResult
from .upsert_product import ProductGateway

logger = logging.getLogger(__name__)

MAX_RETURNED = 50
MAX_DEBUG_RAW = 10


async def run_scrape(
    platform_key: str,
    registry: PlatformRegistry,
    fetcher: PageFetcher,
    gateway: Optional[ProductGateway],
) -> ScrapeResult:
    """
    One fetch -> extract -> filter -> persist cycle for a single platform.

    Raises UnknownPlatform before any browser is started and
    NavigationFailure when the page cannot be loaded. Store errors are
    per-record and only lower saved_count. Without a gateway nothing is
    persisted.
    """
    platform = registry.get(platform_key)
    logger.info("Starting scrape for %s...", platform.key)

    html = await fetcher.fetch_html(platform)
    raw_items = extract_items(html, platform)
    deals = filter_deals(raw_items, platform.key)

    saved = []
    if gateway is not None:
        # the Supabase client is synchronous
        saved = await asyncio.to_thread(gateway.save_all, deals)

    return ScrapeResult(
        status="success",
        total_found=len(raw_items),
        filtered_count=len(deals),
        saved_count=len(saved),
        data=deals[:MAX_RETURNED],
        debug_raw_data=raw_items[:MAX_DEBUG_RAW],
    )


async def main(platform_key: str, dry_run: bool = False) -> ScrapeResult:
    gateway = None
    if not dry_run:
        from backend.app.supabase_client import get_supabase

        gateway = ProductGateway(get_supabase())
    return await run_scrape(platform_key, DEFAULT_REGISTRY, PageFetcher(), gateway)


if __name__ == "__main__":
    #   python -m web_scraping.scrape.scrape trendyol
    #   python -m web_scraping.scrape.scrape temu --dry-run   -> skip Supabase
    parser = argparse.ArgumentParser(description="Run one deal scrape cycle")
    parser.add_argument("platform", choices=DEFAULT_REGISTRY.keys())
    parser.add_argument("--dry-run", action="store_true", help="do not write to Supabase")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    result = asyncio.run(main(args.platform, dry_run=args.dry_run))
    sys.stdout.buffer.write(orjson.dumps(result.model_dump(), option=orjson.OPT_INDENT_2) + b"\n")
