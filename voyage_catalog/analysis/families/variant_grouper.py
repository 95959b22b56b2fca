"""
Property-based variant detection used by admin tooling.

Two products are variants when they share a category and core name and,
for coffee, have identical origin, roast level and tasting notes. Tasting
notes are compared positionally, so the same notes in another order keep
two products apart.
"""
from datetime import datetime
import dataclasses
from typing import Any, Dict, List
from voyage_catalog.analysis.families.base_grouper import BaseFamilyGrouper
from voyage_catalog.analysis.families.core_name import family_match_key
from voyage_catalog.config.app_config import (
    COFFEE_CATEGORIES,
    FORMAT_ORDER,
    SIZE_ORDER,
    SUGGESTED_FORMATS,
    SUGGESTED_SIZES,
)
from voyage_catalog.data.models.family import ProductFamily, VariantSuggestion
from voyage_catalog.data.models.product import Product
from voyage_catalog.ingestion.value_normalizers import normalize_tasting_notes, process_multiple_origins
from voyage_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Fields a bulk edit may overwrite on every family member
EDITABLE_SHARED_FIELDS = ["description", "origin", "roast_level", "tasting_notes"]


def are_variants(first: Product, second: Product) -> bool:
    """
    Check whether two products are variants of each other.

    Args:
        first (Product): A product
        second (Product): Another product

    Returns:
        bool: True if both belong in the same admin variant family
    """
    if first.category != second.category:
        return False

    if family_match_key(first.product_name) != family_match_key(second.product_name):
        return False

    if first.category in COFFEE_CATEGORIES:
        return (
            first.origins == second.origins
            and first.roast_level == second.roast_level
            and list(first.tasting_notes) == list(second.tasting_notes)
        )

    return True


def _rank(value, order: List[str]) -> int:
    return order.index(value) if value in order else len(order)


class VariantFamilyGrouper(BaseFamilyGrouper):
    """
    Groups products into admin variant families, keeping singletons.
    """

    mode = "admin"

    def __init__(self):
        super().__init__(keep_singletons=True)

    def are_related(self, anchor: Product, candidate: Product) -> bool:
        return are_variants(anchor, candidate)

    def order_members(self, members: List[Product]) -> List[Product]:
        """
        Sort members by size, then format, then SKU.

        Args:
            members (List[Product]): Family members

        Returns:
            List[Product]: Members in display order
        """
        return sorted(
            members,
            key=lambda p: (_rank(p.weight, SIZE_ORDER), _rank(p.format, FORMAT_ORDER), p.sku),
        )

    def order_families(self, families: List[ProductFamily]) -> List[ProductFamily]:
        return sorted(families, key=lambda family: family.family_key.casefold())

    def shared_properties(self, members: List[Product]) -> Dict[str, Any]:
        """
        Collect the properties every member has in common.

        Category and description come from the first member; origin, roast
        level and tasting notes are included only when all members agree.

        Args:
            members (List[Product]): Family members, at least two

        Returns:
            Dict[str, Any]: Shared properties keyed by product field name
        """
        first = members[0]
        shared: Dict[str, Any] = {
            "category": first.category,
            "description": first.description,
        }

        if all(member.origins == first.origins for member in members):
            shared["origin"] = first.origin
        if all(member.roast_level == first.roast_level for member in members):
            shared["roast_level"] = first.roast_level
        if all(list(member.tasting_notes) == list(first.tasting_notes) for member in members):
            shared["tasting_notes"] = list(first.tasting_notes)

        return shared


def apply_shared_properties(family: ProductFamily, updates: Dict[str, Any]) -> List[Product]:
    """
    Apply a bulk edit to every member of a family.

    Members are not modified; updated copies are returned with a fresh
    ``updated_at``. Tasting notes and origins given as text are split the
    same way CSV cells are.

    Args:
        family (ProductFamily): Family being edited
        updates (Dict[str, Any]): New values keyed by product field name

    Returns:
        List[Product]: Updated copies of the members, in family order

    Raises:
        ValueError: If ``updates`` names a field that is not shared
    """
    unknown = sorted(set(updates) - set(EDITABLE_SHARED_FIELDS))
    if unknown:
        raise ValueError(f"Fields cannot be edited across a family: {', '.join(unknown)}")

    changes = {key: value for key, value in updates.items() if value is not None}
    if "tasting_notes" in changes:
        changes["tasting_notes"] = normalize_tasting_notes(changes["tasting_notes"])
    if "origin" in changes:
        changes["origin"] = process_multiple_origins(changes["origin"])
    updated_at = datetime.now()
    logger.info(f"Applying {sorted(changes)} to {len(family.variants)} products of '{family.family_key}'")
    return [dataclasses.replace(product, updated_at=updated_at, **changes) for product in family.products]


def generate_variant_suggestions(family: ProductFamily) -> Dict[str, Any]:
    """
    Suggest the size and format combinations a family is missing.

    Args:
        family (ProductFamily): Family to inspect

    Returns:
        Dict[str, Any]: The suggested sizes and formats and a list of
            missing combinations with proposed SKUs
    """
    existing = {(product.weight, product.format) for product in family.products}
    base_sku = "-".join(family.products[0].sku.split("-")[:2]) or "COFFEE-PRODUCT"

    missing = []
    for size in SUGGESTED_SIZES:
        for product_format in SUGGESTED_FORMATS:
            if (size, product_format) in existing:
                continue
            format_abbr = "WHOLE" if product_format == "whole-bean" else product_format.upper()
            missing.append(VariantSuggestion(
                size=size,
                format=product_format,
                suggested_sku=f"{base_sku}-{size.upper()}-{format_abbr}",
            ))

    return {
        "sizes": list(SUGGESTED_SIZES),
        "formats": list(SUGGESTED_FORMATS),
        "missing_combinations": missing,
    }
