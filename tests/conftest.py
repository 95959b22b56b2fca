"""Shared test fixtures for the catalog test suite."""

import os

# Keep test runs from writing log files; must happen before the package is imported
os.environ.setdefault("CATALOG_LOG_TO_FILE", "0")

import pytest

from voyage_catalog.data.connectors.local_blob_connector import LocalBlobConnector
from voyage_catalog.data.models.product import Product
from voyage_catalog.data.repositories.product_repository import ProductRepository


@pytest.fixture
def make_product():
    """Return a factory for catalog products with sensible coffee defaults."""

    def _make(sku="ETH-12OZ-WB", product_name="Ethiopian Yirgacheffe - Whole Bean", **kwargs):
        kwargs.setdefault("price", 14.99)
        kwargs.setdefault("category", "coffee")
        return Product(sku=sku, product_name=product_name, **kwargs)

    return _make


@pytest.fixture
def csv_factory():
    """Return a helper that builds CSV text from a header and rows."""

    def _build(header, rows):
        lines = [",".join(header)] + [",".join(row) for row in rows]
        return "\n".join(lines) + "\n"

    return _build


@pytest.fixture
def sample_csv():
    """A small catalog export as an admin would upload it."""
    return (
        "Sku,Product Name,Type,Price,Roast,Origin,Format,Size,Tasting Notes,Featured,In Stock\n"
        "ETH-12OZ-WB,Ethiopian Yirgacheffe - Whole Bean,Coffee,$16.99,Light,Ethiopia,Whole Bean,12oz,\"Blueberry, Jasmine\",TRUE,TRUE\n"
        "ETH-12OZ-GR,Ethiopian Yirgacheffe - Ground,Coffee,$16.99,Light,Ethiopia,Ground,12oz,\"Blueberry, Jasmine\",FALSE,TRUE\n"
        "HB-1LB-WB,House Blend - Whole Bean,coffee,14.50,Medium,\"Colombia, Brazil\",whole bean,1lb,\"Chocolate; Caramel\",no,\n"
        "MUG-01,Voyage Camp Mug,equipment,12,,,,,,,FALSE\n"
    )


@pytest.fixture
def blob_connector(tmp_path):
    """A local blob connector rooted in a temporary directory."""
    connector = LocalBlobConnector({"root": str(tmp_path / "blobs"), "encoding": "utf-8"})
    yield connector
    connector.disconnect()


@pytest.fixture
def fake_clock():
    """A controllable monotonic clock."""

    class FakeClock:
        def __init__(self):
            self.now = 1000.0

        def __call__(self):
            return self.now

        def advance(self, seconds):
            self.now += seconds

    return FakeClock()


@pytest.fixture
def product_repository(blob_connector, fake_clock):
    """A product repository over the temporary blob store."""
    return ProductRepository(blob_connector, cache_seconds=60, clock=fake_clock)
