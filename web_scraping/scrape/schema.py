from pydantic import BaseModel, Field
from typing import List


class RawItem(BaseModel):
    # strings exactly as read from one item card
    title: str = ""
    price_str: str = ""
    org_price_str: str = ""
    link: str = ""
    img: str = ""


class Product(BaseModel):
    title: str
    price: float
    original_price: float
    discount_rate: int           # integer percent, 0 when not discounted
    image_url: str = ""
    product_url: str
    platform: str
    external_id: str             # the scraped link; unique together with platform

    def to_record(self) -> dict:
        return self.model_dump()


class ScrapeResult(BaseModel):
    status: str = "success"
    total_found: int
    filtered_count: int
    saved_count: int
    data: List[Product] = Field(default_factory=list)
    debug_raw_data: List[RawItem] = Field(default_factory=list)
