"""
Name-based family grouping used by the storefront.
"""
from typing import List, Set, Tuple
from voyage_catalog.analysis.families.base_grouper import BaseFamilyGrouper
from voyage_catalog.analysis.families.core_name import family_match_key
from voyage_catalog.config.app_config import FAMILY_CATEGORY
from voyage_catalog.data.models.family import ProductFamily
from voyage_catalog.data.models.product import Product


class NameFamilyGrouper(BaseFamilyGrouper):
    """
    Groups products whose core names match, ignoring case.

    Single products are never wrapped in a family; they stay in the
    storefront's standalone list.
    """

    mode = "storefront"

    def __init__(self):
        super().__init__(keep_singletons=False, family_category=FAMILY_CATEGORY)

    def are_related(self, anchor: Product, candidate: Product) -> bool:
        return family_match_key(anchor.product_name) == family_match_key(candidate.product_name)

    def split_catalog(self, products: List[Product]) -> Tuple[List[ProductFamily], List[Product]]:
        """
        Split a catalog into variant families and standalone products.

        Args:
            products (List[Product]): Catalog products

        Returns:
            Tuple[List[ProductFamily], List[Product]]: Families of two or more
                products, and every product not in a family, in input order
        """
        families = self.group(products)
        in_family: Set[int] = {id(member) for family in families for member in family.products}
        standalone = [product for product in products if id(product) not in in_family]
        return families, standalone
