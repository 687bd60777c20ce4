# scrape/upsert_product.py
from typing import Any, Dict, Iterable, List, Optional
import logging

from .schema import Product

logger = logging.getLogger(__name__)

CONFLICT_KEY = "platform,external_id"


class ProductGateway:
    """
    Writes deals into the Supabase `products` table.

    Rows are keyed by (platform, external_id); re-sending a known row is
    ignored by the store and reported here as "not saved", not as an error.
    """

    def __init__(self, client, table: str = "products"):
        self.client = client
        self.table = table

    def upsert(self, product: Product) -> Optional[Dict[str, Any]]:
        record = product.to_record()
        try:
            response = (
                self.client
                .table(self.table)
                .upsert(record, on_conflict=CONFLICT_KEY, ignore_duplicates=True)
                .execute()
            )
        except Exception:
            logger.exception("Supabase upsert failed for %s", product.external_id)
            return None

        # Supabase Python client v2 returns an object with .data
        data = getattr(response, "data", None)
        if not data:
            logger.debug("Already stored: %s", product.external_id)
            return None
        return data[0]

    def save_all(self, products: Iterable[Product]) -> List[Dict[str, Any]]:
        """Upsert one product at a time; failed and already-stored rows are left out."""
        saved = []
        for product in products:
            row = self.upsert(product)
            if row is not None:
                saved.append(row)
        return saved
