"""
Product family grouping package.
"""
from voyage_catalog.analysis.families.base_grouper import BaseFamilyGrouper, format_code_for
from voyage_catalog.analysis.families.core_name import extract_core_product_name
from voyage_catalog.analysis.families.grouper_factory import GrouperFactory
from voyage_catalog.analysis.families.name_grouper import NameFamilyGrouper
from voyage_catalog.analysis.families.variant_grouper import (
    VariantFamilyGrouper,
    apply_shared_properties,
    are_variants,
    generate_variant_suggestions,
)
from voyage_catalog.analysis.families.view_models import (
    build_grouped_product,
    find_family_by_slug,
    format_price_display,
    generate_family_slug,
)
