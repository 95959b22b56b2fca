"""
View-model builders for product families.
"""
import re
from typing import Iterable, List, Optional
import numpy as np
from voyage_catalog.analysis.families.core_name import extract_core_product_name
from voyage_catalog.config.app_config import FORMAT_DISPLAY_NAMES
from voyage_catalog.data.models.family import GroupedProduct, PriceRange, ProductFamily


def get_format_display_name(format_code: str) -> str:
    return FORMAT_DISPLAY_NAMES.get(format_code, format_code)


def build_grouped_product(family: ProductFamily) -> GroupedProduct:
    """
    Build the UI-facing aggregate of a family.

    Args:
        family (ProductFamily): The family to present

    Returns:
        GroupedProduct: Family with price range, formats and default variant
    """
    prices = np.array([variant.price for variant in family.variants], dtype=float)
    price_range = PriceRange(min=round(float(prices.min()), 2), max=round(float(prices.max()), 2))

    available_formats: List[str] = []
    for variant in family.variants:
        if variant.format_code and variant.format_code not in available_formats:
            available_formats.append(variant.format_code)

    base = family.base
    default_variant = next(
        (variant for variant in family.variants if variant.sku == base.sku),
        family.variants[0],
    )

    return GroupedProduct(
        base_sku=base.sku,
        product_name=extract_core_product_name(base.product_name),
        category=base.category,
        description=base.description,
        status=base.status,
        featured=any(variant.product.featured for variant in family.variants),
        variants=list(family.variants),
        default_variant=default_variant,
        available_formats=available_formats,
        format_labels={code: get_format_display_name(code) for code in available_formats},
        price_range=price_range,
        roast_level=base.roast_level,
        origin=base.origin,
        tasting_notes=list(base.tasting_notes),
    )


def format_price_display(price_range: PriceRange) -> str:
    """
    Format a price range for display, e.g. ``$14.99`` or ``$14.99 - $19.99``.
    """
    if price_range.min == price_range.max:
        return f"${price_range.min:.2f}"
    return f"${price_range.min:.2f} - ${price_range.max:.2f}"


def generate_family_slug(family_key: str) -> str:
    """
    Build a URL slug from a family key.

    Args:
        family_key (str): Core product name

    Returns:
        str: Lowercase slug of alphanumeric runs joined by dashes
    """
    return re.sub(r"[^a-z0-9]+", "-", family_key.lower()).strip("-")


def find_family_by_slug(families: Iterable[ProductFamily], slug: str) -> Optional[ProductFamily]:
    """
    Find the family whose key produces the given slug.

    Args:
        families (Iterable[ProductFamily]): Families to search
        slug (str): Slug from a storefront URL

    Returns:
        Optional[ProductFamily]: The matching family, or None
    """
    for family in families:
        if generate_family_slug(family.family_key) == slug:
            return family
    return None
