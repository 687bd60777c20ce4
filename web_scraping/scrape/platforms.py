from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from .errors import UnknownPlatform
from .extractor import ExtractionRules

MOBILE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 16_6 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/16.6 Mobile/15E148 Safari/604.1"
)

MOBILE_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "Accept-Language": "tr-TR,tr;q=0.9,en-US;q=0.8,en;q=0.7",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
    "Upgrade-Insecure-Requests": "1",
}


@dataclass(frozen=True)
class BrowserProfile:
    user_agent: str = MOBILE_UA
    viewport: Tuple[int, int] = (390, 844)
    device_scale_factor: float = 3
    extra_http_headers: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(MOBILE_HEADERS))
    )
    # Playwright cookie dicts (name, value, domain/url, path); pins region/currency/locale
    cookies: Tuple[Mapping[str, str], ...] = ()

    def context_options(self) -> Dict:
        width, height = self.viewport
        return {
            "user_agent": self.user_agent,
            "viewport": {"width": width, "height": height},
            "device_scale_factor": self.device_scale_factor,
            "extra_http_headers": dict(self.extra_http_headers),
        }


@dataclass(frozen=True)
class PlatformConfig:
    key: str
    url: str
    item_selector: str
    origin: str
    rules: ExtractionRules = ExtractionRules()
    profile: BrowserProfile = BrowserProfile()


TRENDYOL = PlatformConfig(
    key="trendyol",
    url="https://www.trendyol.com/sr?wc=103328&fl=en-cok-one-cikanlar",
    item_selector=".product-card-jfy",
    origin="https://www.trendyol.com",
    rules=ExtractionRules(
        brand=(".product-brand", ".prdct-desc-cntnr-ttl"),
        name=(".product-name", ".prdct-desc-cntnr-name", ".fn.name"),
        # campaign vs. regular listings use different price classes
        price=(".sale-price", ".prc-box-dscntd", ".prc-box-sllng", ".discounted-price"),
        original_price=(".strikethrough-price", ".prc-box-orgnl", ".original-price"),
    ),
)

TEMU = PlatformConfig(
    key="temu",
    url="https://www.temu.com/az/channel/lightning-deals.html",
    item_selector=".goods-item",
    origin="https://www.temu.com",
    rules=ExtractionRules(
        name=(".goods-title", ".goods-name", "h2", "h3"),
        price=(".goods-price", ".sale-price"),
        original_price=(".goods-market-price", ".original-price"),
    ),
)


class PlatformRegistry:
    """Read-only mapping from platform key to its PlatformConfig."""

    def __init__(self, platforms: Iterable[PlatformConfig]):
        self._platforms: Mapping[str, PlatformConfig] = MappingProxyType(
            {p.key: p for p in platforms}
        )

    def get(self, key: str) -> PlatformConfig:
        try:
            return self._platforms[key]
        except KeyError:
            raise UnknownPlatform(key) from None

    def keys(self) -> List[str]:
        return list(self._platforms)

    def __contains__(self, key: object) -> bool:
        return key in self._platforms

    def __iter__(self):
        return iter(self._platforms.values())

    def __len__(self) -> int:
        return len(self._platforms)


DEFAULT_REGISTRY = PlatformRegistry([TRENDYOL, TEMU])
