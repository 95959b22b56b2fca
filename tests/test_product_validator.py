"""Tests for JSON product payload validation."""

import pytest

from voyage_catalog.data.models.product import BundleItem
from voyage_catalog.exceptions import ProductDataError
from voyage_catalog.ingestion.product_validator import (
    validate_products_data,
    validate_products_for_checkout,
)

ITEM = {"sku": "A", "productName": "A", "price": 1}


class TestPayloadShapes:
    """Tests for the three accepted payload shapes."""

    @pytest.mark.parametrize(
        "payload",
        [
            [ITEM],
            {"products": [ITEM]},
            {"p1": ITEM},
        ],
    )
    def test_equivalent_results(self, payload):
        products = validate_products_data(payload)
        assert len(products) == 1
        assert (products[0].sku, products[0].product_name, products[0].price) == ("A", "A", 1.0)

    @pytest.mark.parametrize("payload", [None, [], {}, {"products": []}, "products", 42])
    def test_rejected_payloads(self, payload):
        with pytest.raises(ProductDataError):
            validate_products_data(payload)

    def test_keyed_map_ignores_non_product_values(self):
        products = validate_products_data({"version": 3, "p1": ITEM, "meta": {"count": 1}})
        assert [p.sku for p in products] == ["A"]


class TestItemValidation:
    """Tests for per-item checks."""

    def test_invalid_items_are_skipped(self):
        products = validate_products_data([
            ITEM,
            {"sku": "", "productName": "Blank SKU", "price": 1},
            {"sku": "C", "name": "Legacy Name", "price": "2.50"},
            {"sku": "D", "productName": "Bool Price", "price": True},
            {"sku": "E", "productName": "Negative", "price": -1},
            {"sku": "F", "price": 3},
            "not a product",
        ])
        assert [p.sku for p in products] == ["A", "C"]
        assert products[1].product_name == "Legacy Name"
        assert products[1].price == 2.5

    def test_all_invalid_raises(self):
        with pytest.raises(ProductDataError, match="No valid products"):
            validate_products_data([{"sku": "A", "productName": "A", "price": "free"}])

    def test_defaults(self):
        product = validate_products_data([dict(ITEM, status="retired", category="Gift Set")])[0]
        assert product.status == "active"
        assert product.category == "gift-set"
        assert product.in_stock is True

    def test_explicit_out_of_stock(self):
        assert validate_products_data([dict(ITEM, inStock=False)])[0].in_stock is False

    def test_serialized_product_validates_to_itself(self, make_product):
        original = make_product(
            original_price=18.0,
            status="draft",
            roast_level="light",
            origin=["Ethiopia", "Kenya"],
            format="whole-bean",
            weight="12oz",
            tasting_notes=["Blueberry", "Jasmine"],
            featured=True,
            bundle_contents=[BundleItem(sku="MUG", quantity=2, unit_price=9.5, notes="blue")],
            shipping_first=5.0,
        )
        restored = validate_products_data([original.to_dict()])[0]
        assert restored.to_dict() == original.to_dict()


class TestCheckoutValidation:
    """Tests for order SKU checks."""

    def test_all_skus_present(self, make_product):
        catalog = [make_product(sku="A"), make_product(sku="B")]
        validate_products_for_checkout(catalog, ["A", "B"])

    def test_missing_sku(self, make_product):
        with pytest.raises(ProductDataError, match="ZZZ"):
            validate_products_for_checkout([make_product(sku="A")], ["A", "ZZZ"])
