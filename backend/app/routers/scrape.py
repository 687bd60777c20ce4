import logging
from typing import Callable

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from web_scraping.scrape.errors import NavigationFailure, UnknownPlatform
from web_scraping.scrape.fetcher import PageFetcher
from web_scraping.scrape.platforms import PlatformRegistry
from web_scraping.scrape.scrape import run_scrape
from web_scraping.scrape.upsert_product import ProductGateway

from ..dependencies import get_fetcher, get_gateway_factory, get_registry
from ..models import ErrorResponse, PlatformInfo, PlatformList, ScrapeResult

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=code, content=ErrorResponse(error=message).model_dump())


@router.get("/platforms", response_model=PlatformList)
def list_platforms(registry: PlatformRegistry = Depends(get_registry)):
    return PlatformList(platforms=[PlatformInfo(key=p.key, url=p.url) for p in registry])


@router.get(
    "/scrape/{platform}",
    response_model=ScrapeResult,
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def scrape(
    platform: str,
    registry: PlatformRegistry = Depends(get_registry),
    fetcher: PageFetcher = Depends(get_fetcher),
    make_gateway: Callable[[], ProductGateway] = Depends(get_gateway_factory),
):
    """
    Run one scrape-and-persist cycle for `platform` and summarise it.

    Errors keep the `{"error": ...}` body: 404 for an unknown platform,
    502 when the listing page cannot be loaded, 500 for anything else
    (including a store client that cannot be built).
    """
    try:
        registry.get(platform)
        gateway = make_gateway()
        return await run_scrape(platform, registry, fetcher, gateway)
    except UnknownPlatform as e:
        return _error(status.HTTP_404_NOT_FOUND, str(e))
    except NavigationFailure as e:
        logger.error("%s", e)
        return _error(status.HTTP_502_BAD_GATEWAY, str(e))
    except Exception as e:
        logger.exception("Scrape for %s failed", platform)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
