import logging
import math
import re
from typing import Iterable, List, Optional

from .schema import Product, RawItem

logger = logging.getLogger(__name__)

MIN_DISCOUNT = 40

_NOT_NUMERIC = re.compile(r"[^0-9,.]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def clean_and_parse(value: Optional[str]) -> float:
    """
    Turn a scraped price string into a float.

    "1.250,50 TL" -> 1250.5 and "28,07 ₼" -> 28.07. When only dots are
    present they are left alone, so "1.200" parses as 1.2; only the
    presence of a comma marks the dot as a thousands separator.
    Empty or unparseable input gives 0.
    """
    if not value:
        return 0.0
    s = _NOT_NUMERIC.sub("", value)
    if "," in s and "." in s:
        s = s.replace(".", "").replace(",", ".", 1)
    elif "," in s:
        s = s.replace(",", ".", 1)

    # parse the leading number and ignore any trailing separators/garbage
    m = _LEADING_NUMBER.match(s)
    if not m:
        return 0.0
    try:
        return float(m.group(0))
    except ValueError:
        return 0.0


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def discount_rate(price: float, original_price: float) -> int:
    if original_price > price > 0:
        return _round_half_up((original_price - price) / original_price * 100)
    return 0


def to_product(raw: RawItem, platform: str) -> Product:
    price = clean_and_parse(raw.price_str)
    org_price = clean_and_parse(raw.org_price_str)
    if org_price == 0:
        org_price = price

    return Product(
        title=raw.title,
        price=price,
        original_price=org_price,
        discount_rate=discount_rate(price, org_price),
        image_url=raw.img,
        product_url=raw.link,
        platform=platform,
        external_id=raw.link,
    )


def is_deal(product: Product, min_discount: int = MIN_DISCOUNT) -> bool:
    return product.discount_rate >= min_discount and product.price > 0


def filter_deals(
    raw_items: Iterable[RawItem], platform: str, min_discount: int = MIN_DISCOUNT
) -> List[Product]:
    products = [to_product(raw, platform) for raw in raw_items]
    deals = [p for p in products if is_deal(p, min_discount)]
    logger.info(
        "Found %d items, %d matched >=%d%% discount.", len(products), len(deals), min_discount
    )
    return deals
