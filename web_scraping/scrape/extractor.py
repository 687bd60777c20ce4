import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Tag

from .schema import RawItem

# digits with . / , separators followed by a currency marker, e.g. "1.250,50 TL", "28,07 ₼"
PRICE_TOKEN = re.compile(r"(\d[\d.,]*)\s*(?:TL|₼|AZN)")

# markup innerText does not render
NOT_RENDERED = "script, style, noscript, template, [hidden]"


@dataclass(frozen=True)
class ExtractionRules:
    """
    Ordered selector chains for one platform's item cards.

    Every chain is tried front to back and the first selector whose text is
    non-empty wins, so the order encodes priority between layout variants
    (mobile first, then desktop).
    """

    brand: Tuple[str, ...] = ()
    name: Tuple[str, ...] = ()
    price: Tuple[str, ...] = ()
    original_price: Tuple[str, ...] = ()
    price_pattern: Optional[re.Pattern] = PRICE_TOKEN


def _text(node: Tag) -> str:
    return node.get_text(" ", strip=True)


def first_text(el: Tag, selectors: Sequence[str]) -> str:
    for sel in selectors:
        node = el.select_one(sel)
        if node is None:
            continue
        text = _text(node)
        if text:
            return text
    return ""


def scan_prices(text: str, pattern: Optional[re.Pattern] = PRICE_TOKEN) -> Tuple[str, str]:
    """
    Find currency-tagged price tokens in free text.

    Returns (sale, original). With two or more tokens the first one is the
    original price and the last one the sale price; a single token is the
    sale price with no original.
    """
    if pattern is None or not text:
        return "", ""
    tokens = [m.group(0) for m in pattern.finditer(text)]
    if len(tokens) >= 2:
        return tokens[-1], tokens[0]
    if tokens:
        return tokens[0], ""
    return "", ""


def resolve_link(el: Tag, origin: str) -> str:
    link = el.get("href") or ""
    if not link:
        anchor = el.select_one("a[href]")
        link = anchor.get("href", "") if anchor else ""
    # a card without any link resolves to the bare origin
    if urlparse(link).scheme in ("http", "https"):
        return link
    return urljoin(origin, link)


def resolve_image(el: Tag) -> str:
    img = el.find("img")
    if img is None:
        return ""
    return img.get("src") or img.get("data-src") or ""


def extract_card(el: Tag, rules: ExtractionRules, origin: str) -> RawItem:
    brand = first_text(el, rules.brand)
    name = first_text(el, rules.name)

    price = first_text(el, rules.price)
    scanned_original = ""
    if not price:
        price, scanned_original = scan_prices(_text(el), rules.price_pattern)

    org_price = first_text(el, rules.original_price) or scanned_original or price

    return RawItem(
        title=f"{brand} {name}".strip(),
        price_str=price,
        org_price_str=org_price,
        link=resolve_link(el, origin),
        img=resolve_image(el),
    )


def extract_items(html: str, platform) -> List[RawItem]:
    """Read one RawItem per element matching the platform's item selector, in DOM order."""
    soup = BeautifulSoup(html, "lxml")
    for node in soup.select(NOT_RENDERED):
        node.decompose()
    return [
        extract_card(el, platform.rules, platform.origin)
        for el in soup.select(platform.item_selector)
    ]
