"""
CSV header normalization.

Maps messy spreadsheet headers ("Product Name", "roast", "Shipping( First
Item)") onto the canonical uppercase catalog columns.
"""
import re
from typing import Dict, List
from voyage_catalog.config.app_config import CSV_COLUMNS

CANONICAL_HEADERS: List[str] = list(CSV_COLUMNS)

# Keys are already normalized (lowercase, single spaces, tight parentheses)
HEADER_ALIASES: Dict[str, str] = {
    # Identity
    "sku": "SKU",
    "product sku": "SKU",
    "item sku": "SKU",
    "product code": "SKU",
    "item code": "SKU",
    "productname": "PRODUCTNAME",
    "product name": "PRODUCTNAME",
    "product_name": "PRODUCTNAME",
    "name": "PRODUCTNAME",
    "title": "PRODUCTNAME",
    "product title": "PRODUCTNAME",
    "category": "CATEGORY",
    "product category": "CATEGORY",
    "type": "CATEGORY",
    "product type": "CATEGORY",
    # Pricing
    "price": "PRICE",
    "unit price": "PRICE",
    "sale price": "PRICE",
    "price (usd)": "PRICE",
    "original price": "ORIGINAL PRICE",
    "originalprice": "ORIGINAL PRICE",
    "compare at price": "ORIGINAL PRICE",
    "compare-at price": "ORIGINAL PRICE",
    "msrp": "ORIGINAL PRICE",
    "was price": "ORIGINAL PRICE",
    # Merchandising
    "description": "DESCRIPTION",
    "product description": "DESCRIPTION",
    "long description": "DESCRIPTION",
    "featured": "FEATURED",
    "is featured": "FEATURED",
    "status": "STATUS",
    "product status": "STATUS",
    # Coffee attributes
    "roast level": "ROAST LEVEL",
    "roastlevel": "ROAST LEVEL",
    "roast_level": "ROAST LEVEL",
    "roast": "ROAST LEVEL",
    "origin": "ORIGIN",
    "origins": "ORIGIN",
    "country of origin": "ORIGIN",
    "region": "ORIGIN",
    "blend composition": "BLEND COMPOSITION",
    "blend": "BLEND COMPOSITION",
    "format": "FORMAT",
    "grind": "FORMAT",
    "grind type": "FORMAT",
    "weight": "WEIGHT",
    "size": "WEIGHT",
    "bag size": "WEIGHT",
    "net weight": "WEIGHT",
    "tasting notes": "TASTING NOTES",
    "tastingnotes": "TASTING NOTES",
    "flavor notes": "TASTING NOTES",
    "notes": "TASTING NOTES",
    # Shipping
    "shippingfirst": "SHIPPINGFIRST",
    "shipping first": "SHIPPINGFIRST",
    "shipping(first item)": "SHIPPINGFIRST",
    "shipping (first item)": "SHIPPINGFIRST",
    "shipping first item": "SHIPPINGFIRST",
    "shippingadditional": "SHIPPINGADDITIONAL",
    "shipping additional": "SHIPPINGADDITIONAL",
    "shipping(additional item)": "SHIPPINGADDITIONAL",
    "shipping (additional item)": "SHIPPINGADDITIONAL",
    "shipping(additional items)": "SHIPPINGADDITIONAL",
    "shipping additional item": "SHIPPINGADDITIONAL",
    # Subscription attributes
    "billing interval": "BILLING INTERVAL",
    "interval": "BILLING INTERVAL",
    "subscription interval": "BILLING INTERVAL",
    "delivery frequency": "DELIVERY FREQUENCY",
    "frequency": "DELIVERY FREQUENCY",
    "trial period days": "TRIAL PERIOD DAYS",
    "trial days": "TRIAL PERIOD DAYS",
    "trial period": "TRIAL PERIOD DAYS",
    "max deliveries": "MAX DELIVERIES",
    "maximum deliveries": "MAX DELIVERIES",
    "enable notification banner": "ENABLE NOTIFICATION BANNER",
    "notification enabled": "ENABLE NOTIFICATION BANNER",
    "notification banner": "ENABLE NOTIFICATION BANNER",
    "notification message": "NOTIFICATION MESSAGE",
    "notification": "NOTIFICATION MESSAGE",
    # Gift bundle attributes
    "bundle type": "BUNDLE TYPE",
    "bundle contents": "BUNDLE CONTENTS",
    "bundle items": "BUNDLE CONTENTS",
    "bundle description": "BUNDLE DESCRIPTION",
    "gift message": "GIFT MESSAGE",
    "packaging type": "PACKAGING TYPE",
    "packaging": "PACKAGING TYPE",
    "seasonal availability": "SEASONAL AVAILABILITY",
    "season": "SEASONAL AVAILABILITY",
    # Availability
    "in stock": "IN STOCK",
    "instock": "IN STOCK",
    "in_stock": "IN STOCK",
    "stock": "IN STOCK",
    "available": "IN STOCK",
}

# Every canonical name maps onto itself so normalization is idempotent
for _canonical in CANONICAL_HEADERS:
    HEADER_ALIASES.setdefault(_canonical.lower(), _canonical)

_WHITESPACE = re.compile(r"\s+")
_OPEN_PAREN = re.compile(r"\(\s+")
_CLOSE_PAREN = re.compile(r"\s+\)")


def norm(header: str) -> str:
    """
    Reduce a header to its alias-table lookup form.

    Args:
        header (str): Raw header cell

    Returns:
        str: Lowercased header with collapsed whitespace and tight parentheses
    """
    text = str(header).lower().replace("\u00a0", " ").strip()
    text = _WHITESPACE.sub(" ", text)
    text = _OPEN_PAREN.sub("(", text)
    return _CLOSE_PAREN.sub(")", text)


def normalize_header(raw_header: str) -> str:
    """
    Map a raw CSV header to its canonical column name.

    Unknown headers are passed through trimmed and uppercased; the row mapper
    ignores canonical names it does not know.

    Args:
        raw_header (str): Header cell as it appears in the file

    Returns:
        str: Canonical header
    """
    return HEADER_ALIASES.get(norm(raw_header), str(raw_header).strip().upper())
