"""
Base grouper for product family detection.
"""
from abc import ABC, abstractmethod
import dataclasses
from typing import Any, Dict, List, Optional, Set
from voyage_catalog.analysis.families.core_name import extract_core_product_name
from voyage_catalog.config.app_config import FORMAT_CODES
from voyage_catalog.data.models.family import ProductFamily, ProductVariant
from voyage_catalog.data.models.product import Product
from voyage_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Base variant precedence, most preferred first
BASE_FORMAT_PRECEDENCE = ["WB", "GR"]


def format_code_for(product_format: Optional[str]) -> str:
    """
    Derive the short format code of a product format.

    Args:
        product_format (Optional[str]): Normalized format such as 'whole-bean'

    Returns:
        str: 'WB', 'GR', 'PODS', 'INSTANT', or the raw value uppercased
    """
    value = (product_format or "").strip().lower()
    return FORMAT_CODES.get(value, value.upper())


class BaseFamilyGrouper(ABC):
    """
    Base class for family groupers.

    Grouping is a visited-set plus linear scan: each ungrouped product
    anchors a new family and collects every later ungrouped product that
    subclasses consider related to it.
    """

    # Grouping mode name, as used by the grouper factory
    mode: str = ""

    def __init__(self, keep_singletons: bool = True, family_category: Optional[str] = None):
        """
        Initialize the base grouper.

        Args:
            keep_singletons (bool): Whether single-member groups are returned as families
            family_category (Optional[str]): Category written onto each family base, if any
        """
        self.keep_singletons = keep_singletons
        self.family_category = family_category

    @abstractmethod
    def are_related(self, anchor: Product, candidate: Product) -> bool:
        """
        Decide whether a candidate belongs in the anchor's family.

        Args:
            anchor (Product): Product that started the family
            candidate (Product): Ungrouped product being tested

        Returns:
            bool: True if the candidate joins the family
        """
        pass

    def family_key(self, anchor: Product) -> str:
        return extract_core_product_name(anchor.product_name)

    def order_members(self, members: List[Product]) -> List[Product]:
        """Hook for reordering members; input order is kept by default."""
        return members

    def order_families(self, families: List[ProductFamily]) -> List[ProductFamily]:
        return families

    def shared_properties(self, members: List[Product]) -> Dict[str, Any]:
        return {}

    def select_base(self, variants: List[ProductVariant]) -> ProductVariant:
        """
        Pick the representative variant: whole bean, then ground, then the first member.

        Args:
            variants (List[ProductVariant]): Family members in family order

        Returns:
            ProductVariant: The base variant
        """
        for code in BASE_FORMAT_PRECEDENCE:
            for variant in variants:
                if variant.format_code == code:
                    return variant
        return variants[0]

    def build_family(self, members: List[Product]) -> ProductFamily:
        """
        Build a family from a non-empty list of related products.

        Args:
            members (List[Product]): Products in input order, anchor first

        Returns:
            ProductFamily: The family with its base selected
        """
        family_key = self.family_key(members[0])
        ordered = self.order_members(members)
        variants = [ProductVariant(product=p, format_code=format_code_for(p.format)) for p in ordered]
        if not variants:
            raise ValueError(f"Family '{family_key}' cannot be built from zero variants")

        base = self.select_base(variants).product
        if self.family_category:
            base = dataclasses.replace(base, category=self.family_category)

        shared = self.shared_properties(ordered) if len(ordered) > 1 else {}
        return ProductFamily(family_key=family_key, base=base, variants=variants, shared_properties=shared)

    def group(self, products: List[Product]) -> List[ProductFamily]:
        """
        Group products into families.

        Args:
            products (List[Product]): Catalog products

        Returns:
            List[ProductFamily]: The detected families
        """
        grouped: Set[int] = set()
        families = []

        for i, anchor in enumerate(products):
            if i in grouped:
                continue

            member_indexes = [i] + [
                j for j in range(i + 1, len(products))
                if j not in grouped and self.are_related(anchor, products[j])
            ]
            grouped.update(member_indexes)

            if len(member_indexes) < 2 and not self.keep_singletons:
                continue

            families.append(self.build_family([products[j] for j in member_indexes]))

        logger.debug(
            f"{self.__class__.__name__} grouped {len(products)} products into {len(families)} families"
        )
        return self.order_families(families)
