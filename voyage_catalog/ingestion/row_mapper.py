"""
Row-to-product mapping for header-normalized CSV rows.
"""
import math
import re
from typing import Any, Dict, List, Optional
from voyage_catalog.config.app_config import COFFEE_CATEGORIES, REQUIRED_COLUMNS, STATUSES
from voyage_catalog.data.models.product import Product
from voyage_catalog.exceptions import RowMappingError
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

_DIGIT = re.compile(r"\d")


def _cell(row: Dict[str, Any], column: str) -> str:
    value = row.get(column)
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return str(value).strip()


def _optional_text(row: Dict[str, Any], column: str) -> Optional[str]:
    return _cell(row, column) or None


def _optional_money(row: Dict[str, Any], column: str) -> Optional[float]:
    value = _cell(row, column)
    return normalize_money(value) if value else None


def map_csv_row_to_product(row: Dict[str, Any], warnings: Optional[List[str]] = None) -> Product:
    """
    Build a canonical product from one header-normalized CSV row.

    The mapper has no side effects. Fallbacks that may hide a data-entry typo
    (unknown category, roast level or status) are appended to ``warnings``
    when a list is supplied, so the caller can log them.

    Args:
        row (Dict[str, Any]): Row keyed by canonical headers
        warnings (Optional[List[str]]): Collector for fallback diagnostics

    Returns:
        Product: The mapped product

    Raises:
        RowMappingError: If a required field is missing or the price is unusable
    """
    missing = [column for column in REQUIRED_COLUMNS if not _cell(row, column)]
    if missing:
        raise RowMappingError(f"Missing required fields: {', '.join(missing)}")

    sku = _cell(row, "SKU")
    raw_price = _cell(row, "PRICE")
    if not _DIGIT.search(raw_price):
        raise RowMappingError(f"Invalid price for SKU {sku}: {raw_price!r}")
    price = normalize_money(raw_price)
    if price < 0:
        raise RowMappingError(f"Negative price for SKU {sku}: {raw_price!r}")

    raw_category = _cell(row, "CATEGORY")
    category = normalize_category(raw_category)
    raw_status = _cell(row, "STATUS")
    raw_in_stock = _cell(row, "IN STOCK")

    if warnings is not None:
        if not is_known_category(raw_category):
            warnings.append(f"SKU {sku}: unknown category {raw_category!r}, using '{category}'")
        if raw_status and raw_status.lower() not in STATUSES:
            warnings.append(f"SKU {sku}: unknown status {raw_status!r}, using 'active'")

    product = Product(
        sku=sku,
        product_name=_cell(row, "PRODUCTNAME"),
        category=category,
        price=price,
        original_price=_optional_money(row, "ORIGINAL PRICE"),
        description=_cell(row, "DESCRIPTION"),
        featured=normalize_bool(_cell(row, "FEATURED")),
        status=normalize_status(raw_status),
        in_stock=normalize_bool(raw_in_stock) if raw_in_stock else True,
        weight=normalize_weight(_cell(row, "WEIGHT")),
        shipping_first=_optional_money(row, "SHIPPINGFIRST"),
        shipping_additional=_optional_money(row, "SHIPPINGADDITIONAL"),
    )

    if category in COFFEE_CATEGORIES:
        raw_roast = _cell(row, "ROAST LEVEL")
        if warnings is not None and not is_known_roast_level(raw_roast):
            warnings.append(f"SKU {sku}: unrecognized roast level {raw_roast!r}")
        product.roast_level = normalize_roast_level(raw_roast)
        product.origin = process_multiple_origins(_cell(row, "ORIGIN"))
        product.blend_composition = _optional_text(row, "BLEND COMPOSITION")
        product.format = normalize_format(_cell(row, "FORMAT")) or None
        product.tasting_notes = normalize_tasting_notes(_cell(row, "TASTING NOTES"))
    elif category == "subscription":
        product.billing_interval = _optional_text(row, "BILLING INTERVAL")
        product.delivery_frequency = _optional_text(row, "DELIVERY FREQUENCY")
        product.trial_period_days = normalize_int(_cell(row, "TRIAL PERIOD DAYS"))
        product.max_deliveries = normalize_int(_cell(row, "MAX DELIVERIES"))
        product.enable_notification_banner = normalize_bool(_cell(row, "ENABLE NOTIFICATION BANNER"))
        product.notification_message = _optional_text(row, "NOTIFICATION MESSAGE")
    elif category == "gift-set":
        product.bundle_type = _optional_text(row, "BUNDLE TYPE")
        product.bundle_contents = parse_bundle_contents(_cell(row, "BUNDLE CONTENTS"))
        product.bundle_description = _optional_text(row, "BUNDLE DESCRIPTION")
        product.gift_message = _optional_text(row, "GIFT MESSAGE")
        product.packaging_type = _optional_text(row, "PACKAGING TYPE")
        product.seasonal_availability = _optional_text(row, "SEASONAL AVAILABILITY")

    return product
