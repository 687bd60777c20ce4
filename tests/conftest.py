"""
Shared fakes for the scraper test suite.

Nothing here talks to a browser or to Supabase: the page fetcher returns
canned HTML and the Supabase client keeps rows in a dict keyed the same way
as the real unique constraint.
"""

import os

# backend.app.main reads settings at import time
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-service-key")

import pytest

from web_scraping.scrape.upsert_product import ProductGateway


class FakeFetcher:
    def __init__(self, html="", error=None):
        self.html = html
        self.error = error
        self.calls = []

    async def fetch_html(self, platform):
        self.calls.append(platform.key)
        if self.error is not None:
            raise self.error
        return self.html


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.pending = None

    def upsert(self, record, on_conflict="", ignore_duplicates=False):
        self.client.calls.append(
            {"table": self.table, "on_conflict": on_conflict, "ignore_duplicates": ignore_duplicates}
        )
        self.pending = record
        return self

    def execute(self):
        record = self.pending
        if record["external_id"] in self.client.fail_ids:
            raise RuntimeError("duplicate key value violates check constraint")
        key = (record["platform"], record["external_id"])
        if key in self.client.rows:
            return FakeResponse([])
        self.client.rows[key] = dict(record)
        return FakeResponse([dict(record, id=len(self.client.rows))])


class FakeSupabase:
    def __init__(self, fail_ids=()):
        self.rows = {}
        self.calls = []
        self.fail_ids = set(fail_ids)

    def table(self, name):
        return FakeQuery(self, name)


def trendyol_card(
    href="/nike/air-p-1",
    brand="Nike",
    name="Air Max",
    price="80 ₼",
    org_price="160 ₼",
    img="https://cdn.example.com/air.jpg",
):
    parts = [f'<a class="product-card-jfy" href="{href}">']
    if brand:
        parts.append(f'<span class="product-brand">{brand}</span>')
    if name:
        parts.append(f'<span class="product-name">{name}</span>')
    if price:
        parts.append(f'<span class="sale-price">{price}</span>')
    if org_price:
        parts.append(f'<span class="strikethrough-price">{org_price}</span>')
    if img:
        parts.append(f'<img src="{img}">')
    parts.append("</a>")
    return "".join(parts)


def page(*cards):
    return "<html><body><div class='grid'>" + "".join(cards) + "</div></body></html>"


@pytest.fixture()
def supabase():
    return FakeSupabase()


@pytest.fixture()
def gateway(supabase):
    return ProductGateway(supabase)
