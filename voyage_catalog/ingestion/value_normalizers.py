"""
Value normalizers for catalog CSV cells.

Every function here is total: bad input degrades to a safe default instead of
raising. Structural problems (missing SKU, unusable price) are the row
mapper's concern.
"""
import math
import re
from typing import Any, Dict, List, Optional, Union
from voyage_catalog.config.app_config import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_ROAST_LEVEL,
    DEFAULT_STATUS,
    ROAST_LEVELS,
    STATUSES,
)
from voyage_catalog.data.models.product import BundleItem

TRUTHY_VALUES = {"true", "yes", "1", "on"}

CATEGORY_SYNONYMS: Dict[str, str] = {
    "coffee": "coffee",
    "coffees": "coffee",
    "beans": "coffee",
    "subscription": "subscription",
    "subscriptions": "subscription",
    "sub": "subscription",
    "gift": "gift-set",
    "gifts": "gift-set",
    "gift-set": "gift-set",
    "gift set": "gift-set",
    "giftset": "gift-set",
    "gift-bundle": "gift-set",
    "gift bundle": "gift-set",
    "bundle": "gift-set",
    "equipment": "equipment",
    "gear": "equipment",
    "accessories": "equipment",
    "brewing equipment": "equipment",
    "mushroom-coffee": "mushroom-coffee",
    "mushroom coffee": "mushroom-coffee",
    "mushroom": "mushroom-coffee",
}

_NON_MONEY_CHARS = re.compile(r"[^0-9.\-]")
_WHITESPACE = re.compile(r"\s+")
_NOTE_SEPARATORS = re.compile(r"[,;]")


def _clean(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, float) and math.isnan(raw):
        return ""
    return str(raw).strip()


def normalize_money(raw: Any) -> float:
    """
    Parse a money cell such as ``"$19.99"`` or ``" 19.99 USD"``.

    Args:
        raw (Any): Cell value

    Returns:
        float: Amount rounded to 2 decimals, 0 when unparseable
    """
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        try:
            value = float(_NON_MONEY_CHARS.sub("", _clean(raw)))
        except ValueError:
            return 0.0
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return round(value, 2)


def normalize_bool(raw: Any) -> bool:
    """
    Interpret the truthy spellings used in spreadsheets (TRUE, yes, 1, on).

    Args:
        raw (Any): Cell value

    Returns:
        bool: True for a recognized truthy spelling, else False
    """
    if isinstance(raw, bool):
        return raw
    return _clean(raw).lower() in TRUTHY_VALUES


def is_known_category(raw: Any) -> bool:
    return _clean(raw).lower() in CATEGORY_SYNONYMS


def normalize_category(raw: Any) -> str:
    """
    Map a category cell onto the category enum.

    Unknown or empty input falls back to ``coffee``.

    Args:
        raw (Any): Cell value

    Returns:
        str: One of CATEGORIES
    """
    category = CATEGORY_SYNONYMS.get(_clean(raw).lower(), DEFAULT_CATEGORY)
    return category if category in CATEGORIES else DEFAULT_CATEGORY


def is_known_roast_level(raw: Any) -> bool:
    value = _clean(raw).lower()
    return not value or normalize_roast_level(value) in ROAST_LEVELS


def normalize_roast_level(raw: Any) -> str:
    """
    Map a roast cell onto the roast enum by substring match.

    ``medium-dark`` is tested before ``dark`` and ``medium`` so that it is not
    swallowed by either. Empty input defaults to ``medium``; anything else
    unrecognized is passed through lowercased.

    Args:
        raw (Any): Cell value

    Returns:
        str: Roast level
    """
    value = _clean(raw).lower()
    if not value:
        return DEFAULT_ROAST_LEVEL
    if "medium-dark" in value or "medium dark" in value or "medium/dark" in value:
        return "medium-dark"
    if "dark" in value:
        return "dark"
    if "light" in value:
        return "light"
    if "medium" in value:
        return "medium"
    return value


def normalize_format(raw: Any) -> str:
    """
    Map a format cell onto the format enum by substring match.

    Unknown formats pass through lowercased.

    Args:
        raw (Any): Cell value

    Returns:
        str: whole-bean, ground, pods, instant or the lowercased input
    """
    value = _clean(raw).lower()
    if "whole" in value:
        return "whole-bean"
    if "ground" in value:
        return "ground"
    if "pod" in value:
        return "pods"
    if "instant" in value:
        return "instant"
    return value


def normalize_weight(raw: Any) -> Optional[str]:
    value = _WHITESPACE.sub(" ", _clean(raw))
    return value or None


def normalize_status(raw: Any) -> str:
    value = _clean(raw).lower()
    return value if value in STATUSES else DEFAULT_STATUS


def normalize_int(raw: Any) -> Optional[int]:
    """
    Parse an optional whole number cell (``"14"``, ``"14.0"``).

    Args:
        raw (Any): Cell value

    Returns:
        Optional[int]: Parsed value, None when empty or not numeric
    """
    if isinstance(raw, bool):
        return None
    try:
        return int(float(_clean(raw)))
    except (ValueError, OverflowError):
        return None


def normalize_tasting_notes(raw: Any) -> List[str]:
    """
    Split tasting notes on commas or semicolons.

    Args:
        raw (Any): List of notes or delimited text

    Returns:
        List[str]: Trimmed, non-empty notes in input order
    """
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        parts = [_clean(note) for note in raw]
    else:
        parts = [part.strip() for part in _NOTE_SEPARATORS.split(_clean(raw))]
    return [part for part in parts if part]


def process_multiple_origins(raw: Any) -> Optional[Union[str, List[str]]]:
    """
    Split a comma-separated origin cell.

    A single origin stays a string; a blend of several regions becomes a list
    so callers can tell the two apart.

    Args:
        raw (Any): Origin text or list

    Returns:
        Optional[Union[str, List[str]]]: Origin, list of origins, or None
    """
    if isinstance(raw, (list, tuple)):
        origins = [_clean(item) for item in raw]
    else:
        value = _clean(raw)
        if not value:
            return None
        origins = [part.strip() for part in value.split(",")] if "," in value else [value]

    origins = [origin for origin in origins if origin]
    if not origins:
        return None
    if len(origins) == 1:
        return origins[0]
    return origins


def parse_bundle_contents(raw: Any) -> List[BundleItem]:
    """
    Parse the ``SKU1:QTY1:PRICE1,SKU2:QTY2:PRICE2`` bundle format.

    Entries with an empty SKU are dropped. Quantity defaults to 1 and unit
    price to 0 when not numeric. An optional fourth segment is kept as notes.

    Args:
        raw (Any): Bundle contents cell

    Returns:
        List[BundleItem]: Parsed bundle lines (possibly empty)
    """
    items: List[BundleItem] = []
    for entry in _clean(raw).split(","):
        parts = [part.strip() for part in entry.split(":")]
        sku = parts[0] if parts else ""
        if not sku:
            continue

        quantity = normalize_int(parts[1]) if len(parts) > 1 else None
        unit_price = 0.0
        if len(parts) > 2:
            try:
                unit_price = round(float(parts[2]), 2)
            except ValueError:
                unit_price = 0.0
            if math.isnan(unit_price) or math.isinf(unit_price):
                unit_price = 0.0
        notes = None
        if len(parts) > 3:
            notes = ":".join(parts[3:]) or None

        items.append(BundleItem(
            sku=sku,
            quantity=quantity if quantity is not None else 1,
            unit_price=unit_price,
            notes=notes,
        ))
    return items
