"""
Application-wide configuration settings for the Voyage catalog.
"""
import os
from typing import Dict, List

# Upload limits
MAX_UPLOAD_MB = int(os.environ.get("CATALOG_MAX_UPLOAD_MB", "10"))
MAX_UPLOAD_BYTES = MAX_UPLOAD_MB * 1024 * 1024
ALLOWED_UPLOAD_EXTENSION = ".csv"

# Number of per-row diagnostics returned to the caller of an import
MAX_REPORTED_ERRORS = int(os.environ.get("CATALOG_MAX_REPORTED_ERRORS", "10"))

# Product cache lifetime in seconds (0 disables caching)
CACHE_SECONDS = int(os.environ.get("CATALOG_CACHE_SECONDS", "60"))

# Columns an uploaded CSV must contain after header normalization
REQUIRED_COLUMNS: List[str] = ["SKU", "PRODUCTNAME", "CATEGORY", "PRICE"]

# Canonical column order used for the catalog CSV
CSV_COLUMNS: List[str] = [
    "SKU",
    "PRODUCTNAME",
    "CATEGORY",
    "PRICE",
    "ORIGINAL PRICE",
    "DESCRIPTION",
    "FEATURED",
    "STATUS",
    "ROAST LEVEL",
    "ORIGIN",
    "BLEND COMPOSITION",
    "FORMAT",
    "WEIGHT",
    "TASTING NOTES",
    "SHIPPINGFIRST",
    "SHIPPINGADDITIONAL",
    "BILLING INTERVAL",
    "DELIVERY FREQUENCY",
    "TRIAL PERIOD DAYS",
    "MAX DELIVERIES",
    "ENABLE NOTIFICATION BANNER",
    "NOTIFICATION MESSAGE",
    "BUNDLE TYPE",
    "BUNDLE CONTENTS",
    "BUNDLE DESCRIPTION",
    "GIFT MESSAGE",
    "PACKAGING TYPE",
    "SEASONAL AVAILABILITY",
    "IN STOCK",
]

# Product categories
DEFAULT_CATEGORY = "coffee"
CATEGORIES: List[str] = ["coffee", "subscription", "gift-set", "equipment", "mushroom-coffee"]
COFFEE_CATEGORIES: List[str] = ["coffee", "mushroom-coffee"]
FAMILY_CATEGORY = "coffee-family"

# Product lifecycle
DEFAULT_STATUS = "active"
STATUSES: List[str] = ["active", "draft", "archived"]

# Roast levels
DEFAULT_ROAST_LEVEL = "medium"
ROAST_LEVELS: List[str] = ["light", "medium", "medium-dark", "dark"]

# Format codes used for variant selection
FORMAT_CODES: Dict[str, str] = {
    "whole-bean": "WB",
    "ground": "GR",
    "pods": "PODS",
    "k-cups": "PODS",
    "instant": "INSTANT",
}

FORMAT_DISPLAY_NAMES: Dict[str, str] = {
    "WB": "Whole Bean",
    "GR": "Ground",
    "PODS": "Coffee Pods",
    "INSTANT": "Instant",
}

# Grouping modes
GROUPING_MODES: List[str] = ["storefront", "admin"]

# Ordering used when presenting admin variant families
SIZE_ORDER: List[str] = ["12oz", "1lb", "2lb", "5lb"]
FORMAT_ORDER: List[str] = ["whole-bean", "ground", "instant", "pods"]

# Combinations offered by the admin variant suggestion helper
SUGGESTED_SIZES: List[str] = ["12oz", "1lb", "2lb"]
SUGGESTED_FORMATS: List[str] = ["whole-bean", "ground"]
