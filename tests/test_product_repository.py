"""Tests for the blob connector and the product repository."""

import pytest

from voyage_catalog.data.connectors.local_blob_connector import LocalBlobConnector
from voyage_catalog.exceptions import ProductDataError, ProductNotFoundError


class TestLocalBlobConnector:
    """Tests for the filesystem blob store."""

    def test_put_list_fetch(self, blob_connector):
        blob = blob_connector.put("products.csv", "SKU\nA\n")
        blob_connector.put("products_20240101_000000.csv", "raw")
        blob_connector.put("orders.json", "[]")

        assert blob.url.startswith("file://")
        assert blob_connector.fetch(blob.url) == "SKU\nA\n"
        assert [b.key for b in blob_connector.list("products")] == [
            "products.csv",
            "products_20240101_000000.csv",
        ]

    def test_put_overwrites(self, blob_connector):
        blob_connector.put("products.csv", "old")
        blob = blob_connector.put("products.csv", "new")
        assert blob_connector.fetch(blob.url) == "new"
        assert len(blob_connector.list()) == 1

    def test_rejects_keys_outside_root(self, blob_connector):
        with pytest.raises(ValueError):
            blob_connector.put("../escape.csv", "x")

    def test_rejects_non_file_urls(self, blob_connector):
        with pytest.raises(ValueError):
            blob_connector.fetch("https://example.com/products.csv")

    def test_context_manager(self, tmp_path):
        with LocalBlobConnector({"root": str(tmp_path / "store")}) as connector:
            assert connector.root is not None
            assert (tmp_path / "store").is_dir()
        assert connector.root is None


class TestProductRepositoryReads:
    """Tests for catalog reads and guardrails."""

    def test_missing_blob_is_empty_catalog(self, product_repository):
        assert product_repository.get_all() == []

    def test_json_in_csv_blob_is_empty_catalog(self, product_repository, blob_connector):
        blob_connector.put("products.csv", '[{"sku": "A"}]')
        assert product_repository.get_all() == []

    def test_header_only_is_empty_catalog(self, product_repository):
        product_repository.save_all([])
        assert product_repository.get_all() == []

    def test_unreadable_catalog_is_empty(self, product_repository, blob_connector):
        blob_connector.put("products.csv", "foo,bar\n1,2\n")
        assert product_repository.get_all() == []

    def test_save_and_reload(self, product_repository, make_product):
        products = [
            make_product(sku="A", tasting_notes=["Cocoa"], featured=True),
            make_product(sku="B", category="equipment", product_name="Camp Mug"),
        ]
        product_repository.save_all(products)
        loaded = product_repository.get_all()

        assert [p.sku for p in loaded] == ["A", "B"]
        assert loaded[0].tasting_notes == ["Cocoa"]
        assert loaded[0].featured is True
        assert loaded[1].category == "equipment"

    def test_cache_until_expiry(self, product_repository, blob_connector, make_product, fake_clock):
        product_repository.save_all([make_product(sku="A")])
        assert len(product_repository.get_all()) == 1

        # Written behind the repository's back
        blob_connector.put("products.csv", "SKU,PRODUCTNAME,CATEGORY,PRICE\nA,A,coffee,1\nB,B,coffee,2\n")
        assert len(product_repository.get_all()) == 1
        assert len(product_repository.get_all(bust_cache=True)) == 2

        blob_connector.put("products.csv", "SKU,PRODUCTNAME,CATEGORY,PRICE\n")
        fake_clock.advance(61)
        assert product_repository.get_all() == []

    def test_returned_list_is_a_copy(self, product_repository, make_product):
        product_repository.save_all([make_product(sku="A")])
        product_repository.get_all().clear()
        assert len(product_repository.get_all()) == 1


class TestProductRepositoryWrites:
    """Tests for catalog writes."""

    def test_save_rejects_duplicate_skus(self, product_repository, make_product):
        with pytest.raises(ProductDataError, match="A"):
            product_repository.save_all([make_product(sku="A"), make_product(sku="A")])

    def test_add_update_delete(self, product_repository, make_product):
        product_repository.add_product(make_product(sku="A", price=10.0))
        product_repository.add_product(make_product(sku="B"))

        product_repository.update_product(make_product(sku="A", price=12.5))
        assert product_repository.get_by_sku("A").price == 12.5

        assert product_repository.delete_product("B") is True
        assert product_repository.delete_product("B") is False
        assert [p.sku for p in product_repository.get_all()] == ["A"]

    def test_add_duplicate(self, product_repository, make_product):
        product_repository.add_product(make_product(sku="A"))
        with pytest.raises(ProductDataError):
            product_repository.add_product(make_product(sku="A"))

    def test_update_missing(self, product_repository, make_product):
        with pytest.raises(ProductNotFoundError):
            product_repository.update_product(make_product(sku="NOPE"))
        with pytest.raises(KeyError):
            product_repository.update_product(make_product(sku="NOPE"))

    def test_json_snapshot(self, product_repository, make_product):
        assert product_repository.load_products_json() == []
        product_repository.save_json([make_product(sku="A", origin=["Kenya", "Peru"])])
        loaded = product_repository.load_products_json()
        assert [p.sku for p in loaded] == ["A"]
        assert loaded[0].origin == ["Kenya", "Peru"]

    def test_corrupt_json_snapshot(self, product_repository, blob_connector):
        blob_connector.put("products.json", "{not json")
        with pytest.raises(ProductDataError):
            product_repository.load_products_json()

    def test_archive_upload(self, product_repository):
        blob = product_repository.archive_upload("raw,csv\n", "20240101_120000")
        assert blob.key == "products_20240101_120000.csv"
