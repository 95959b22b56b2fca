"""Tests for the cell value normalizers."""

import pytest

from voyage_catalog.ingestion.value_normalizers import (
    is_known_category,
    is_known_roast_level,
    normalize_bool,
    normalize_category,
    normalize_format,
    normalize_int,
    normalize_money,
    normalize_roast_level,
    normalize_status,
    normalize_tasting_notes,
    normalize_weight,
    parse_bundle_contents,
    process_multiple_origins,
)


class TestNormalizeMoney:
    """Tests for money parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("$19.99", 19.99),
            (" 1,299.50 ", 1299.5),
            ("14.50 USD", 14.5),
            (3.14159, 3.14),
            (12, 12.0),
        ],
    )
    def test_parses_amounts(self, raw, expected):
        assert normalize_money(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", None, "1.2.3", True, float("nan")])
    def test_unparseable_is_zero(self, raw):
        assert normalize_money(raw) == 0.0


class TestNormalizeBool:
    """Tests for spreadsheet boolean spellings."""

    @pytest.mark.parametrize("raw", ["TRUE", "yes", "1", "On", " true ", True])
    def test_truthy(self, raw):
        assert normalize_bool(raw) is True

    @pytest.mark.parametrize("raw", ["false", "no", "0", "", None, "maybe", False])
    def test_falsy(self, raw):
        assert normalize_bool(raw) is False


class TestNormalizeCategory:
    """Tests for category enum mapping."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Coffee", "coffee"),
            ("Gift Set", "gift-set"),
            ("bundle", "gift-set"),
            ("Mushroom Coffee", "mushroom-coffee"),
            ("subscriptions", "subscription"),
            ("Accessories", "equipment"),
        ],
    )
    def test_known_categories(self, raw, expected):
        assert normalize_category(raw) == expected
        assert is_known_category(raw)

    @pytest.mark.parametrize("raw", ["teapot", "", None])
    def test_unknown_falls_back_to_coffee(self, raw):
        assert normalize_category(raw) == "coffee"
        assert not is_known_category(raw)


class TestNormalizeRoastLevel:
    """Tests for roast enum mapping."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Medium-Dark Roast", "medium-dark"),
            ("medium dark", "medium-dark"),
            ("Medium/Dark", "medium-dark"),
            ("DARK", "dark"),
            ("Light roast", "light"),
            ("Medium", "medium"),
        ],
    )
    def test_known_levels(self, raw, expected):
        assert normalize_roast_level(raw) == expected

    def test_empty_defaults_to_medium(self):
        assert normalize_roast_level("") == "medium"
        assert is_known_roast_level("")

    def test_unknown_passes_through_lowercased(self):
        assert normalize_roast_level("Espresso") == "espresso"
        assert not is_known_roast_level("Espresso")


class TestNormalizeFormat:
    """Tests for format enum mapping."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Whole Bean", "whole-bean"),
            ("Ground", "ground"),
            ("K-Cup Pods", "pods"),
            ("instant", "instant"),
            ("Capsule", "capsule"),
            ("", ""),
        ],
    )
    def test_formats(self, raw, expected):
        assert normalize_format(raw) == expected


class TestSmallNormalizers:
    """Tests for weight, status and integer cells."""

    def test_weight_collapses_whitespace(self):
        assert normalize_weight("  12   oz ") == "12 oz"
        assert normalize_weight("") is None

    def test_status(self):
        assert normalize_status("Draft") == "draft"
        assert normalize_status("bogus") == "active"
        assert normalize_status(None) == "active"

    def test_int(self):
        assert normalize_int("14") == 14
        assert normalize_int("14.0") == 14
        assert normalize_int("abc") is None
        assert normalize_int("") is None


class TestTastingNotes:
    """Tests for tasting note splitting."""

    def test_splits_on_commas_and_semicolons(self):
        assert normalize_tasting_notes("Chocolate, Citrus; Caramel") == ["Chocolate", "Citrus", "Caramel"]

    def test_drops_empty_entries(self):
        assert normalize_tasting_notes(" , ; ") == []
        assert normalize_tasting_notes(None) == []

    def test_list_input(self):
        assert normalize_tasting_notes([" Cocoa ", "", "Plum"]) == ["Cocoa", "Plum"]


class TestMultipleOrigins:
    """Tests for origin splitting."""

    def test_single_origin_stays_string(self):
        assert process_multiple_origins(" Colombia ") == "Colombia"

    def test_blend_becomes_list(self):
        assert process_multiple_origins("Colombia, Brazil") == ["Colombia", "Brazil"]

    def test_empty_is_none(self):
        assert process_multiple_origins("") is None
        assert process_multiple_origins(" , ") is None

    def test_list_input_drops_blanks(self):
        assert process_multiple_origins(["Kenya", " ", "Peru"]) == ["Kenya", "Peru"]
        assert process_multiple_origins(["Kenya"]) == "Kenya"


class TestBundleContents:
    """Tests for the SKU:QTY:PRICE bundle format."""

    def test_parses_items(self):
        items = parse_bundle_contents("MB-12:2:14.99,GIFT-MUG:1:9.5")
        assert [(i.sku, i.quantity, i.unit_price) for i in items] == [
            ("MB-12", 2, 14.99),
            ("GIFT-MUG", 1, 9.5),
        ]

    def test_defaults_for_bad_numbers(self):
        item = parse_bundle_contents("BAD::x")[0]
        assert item.sku == "BAD"
        assert item.quantity == 1
        assert item.unit_price == 0.0

    def test_drops_items_without_sku(self):
        assert parse_bundle_contents(":3:1.00") == []
        assert parse_bundle_contents("") == []

    def test_keeps_notes(self):
        item = parse_bundle_contents("SKU1:1:2.00:Gift wrap")[0]
        assert item.notes == "Gift wrap"
