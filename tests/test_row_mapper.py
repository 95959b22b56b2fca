"""Tests for mapping normalized CSV rows to products."""

import pytest

from voyage_catalog.exceptions import RowMappingError
from voyage_catalog.ingestion.row_mapper import map_csv_row_to_product


def coffee_row(**overrides):
    row = {
        "SKU": "ETH-12OZ-WB",
        "PRODUCTNAME": "Ethiopian Yirgacheffe - Whole Bean",
        "CATEGORY": "coffee",
        "PRICE": "$16.99",
        "ROAST LEVEL": "Light Roast",
        "ORIGIN": "Ethiopia",
        "FORMAT": "Whole Bean",
        "WEIGHT": "12oz",
        "TASTING NOTES": "Blueberry, Jasmine",
        "FEATURED": "TRUE",
        "STATUS": "Active",
    }
    row.update(overrides)
    return row


class TestCoffeeRows:
    """Tests for coffee rows."""

    def test_maps_coffee_fields(self):
        product = map_csv_row_to_product(coffee_row())
        assert product.sku == "ETH-12OZ-WB"
        assert product.price == 16.99
        assert product.category == "coffee"
        assert product.roast_level == "light"
        assert product.origin == "Ethiopia"
        assert product.format == "whole-bean"
        assert product.weight == "12oz"
        assert product.tasting_notes == ["Blueberry", "Jasmine"]
        assert product.featured is True
        assert product.status == "active"

    def test_optional_fields_default(self):
        product = map_csv_row_to_product(coffee_row())
        assert product.in_stock is True
        assert product.original_price is None
        assert product.description == ""

    def test_explicit_out_of_stock(self):
        assert map_csv_row_to_product(coffee_row(**{"IN STOCK": "FALSE"})).in_stock is False

    def test_missing_format_is_none(self):
        assert map_csv_row_to_product(coffee_row(FORMAT="")).format is None

    def test_blend_origins_become_list(self):
        product = map_csv_row_to_product(coffee_row(ORIGIN="Colombia, Brazil"))
        assert product.origin == ["Colombia", "Brazil"]

    def test_nan_cells_are_empty(self):
        product = map_csv_row_to_product(coffee_row(DESCRIPTION=float("nan")))
        assert product.description == ""


class TestRequiredFields:
    """Tests for row-level failures."""

    @pytest.mark.parametrize("column", ["SKU", "PRODUCTNAME", "CATEGORY", "PRICE"])
    def test_missing_required_field(self, column):
        with pytest.raises(RowMappingError, match=column):
            map_csv_row_to_product(coffee_row(**{column: "  "}))

    def test_price_without_digits(self):
        with pytest.raises(RowMappingError, match="Invalid price"):
            map_csv_row_to_product(coffee_row(PRICE="free"))

    def test_negative_price(self):
        with pytest.raises(RowMappingError, match="Negative price"):
            map_csv_row_to_product(coffee_row(PRICE="-5"))


class TestCategoryBranches:
    """Tests for subscription and gift bundle attributes."""

    def test_subscription_fields(self):
        row = {
            "SKU": "SUB-MONTHLY",
            "PRODUCTNAME": "Monthly Roaster's Choice",
            "CATEGORY": "Subscription",
            "PRICE": "22",
            "BILLING INTERVAL": "month",
            "DELIVERY FREQUENCY": "monthly",
            "TRIAL PERIOD DAYS": "14",
            "MAX DELIVERIES": "",
            "ENABLE NOTIFICATION BANNER": "yes",
            "NOTIFICATION MESSAGE": "Ships on the 1st",
            "ROAST LEVEL": "dark",
        }
        product = map_csv_row_to_product(row)
        assert product.category == "subscription"
        assert product.billing_interval == "month"
        assert product.trial_period_days == 14
        assert product.max_deliveries is None
        assert product.enable_notification_banner is True
        assert product.roast_level is None

    def test_gift_set_fields(self):
        row = {
            "SKU": "GIFT-SAMPLER",
            "PRODUCTNAME": "Explorer Sampler",
            "CATEGORY": "gift set",
            "PRICE": "39.00",
            "BUNDLE TYPE": "sampler",
            "BUNDLE CONTENTS": "ETH-12OZ-WB:1:16.99,HB-1LB-WB:1:14.50",
            "GIFT MESSAGE": "Enjoy!",
        }
        product = map_csv_row_to_product(row)
        assert product.category == "gift-set"
        assert [item.sku for item in product.bundle_contents] == ["ETH-12OZ-WB", "HB-1LB-WB"]
        assert product.gift_message == "Enjoy!"
        assert product.tasting_notes == []


class TestWarnings:
    """Tests for fallback diagnostics."""

    def test_unknown_category_warns(self):
        warnings = []
        product = map_csv_row_to_product(coffee_row(CATEGORY="Cofee"), warnings=warnings)
        assert product.category == "coffee"
        assert any("unknown category" in w for w in warnings)

    def test_unknown_roast_and_status_warn(self):
        warnings = []
        map_csv_row_to_product(coffee_row(**{"ROAST LEVEL": "Espresso", "STATUS": "live"}), warnings=warnings)
        assert len(warnings) == 2

    def test_clean_row_has_no_warnings(self):
        warnings = []
        map_csv_row_to_product(coffee_row(), warnings=warnings)
        assert warnings == []
