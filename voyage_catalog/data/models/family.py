"""
Product family data models.

Families are derived views over a product list. They are rebuilt on every
catalog read and never persisted.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from voyage_catalog.data.models.product import Product


@dataclass
class ProductVariant:
    """
    A family member tagged with its format code (``WB``, ``GR``, ...).
    """
    product: Product
    format_code: str

    @property
    def sku(self) -> str:
        return self.product.sku

    @property
    def price(self) -> float:
        return self.product.price

    @property
    def format(self) -> Optional[str]:
        return self.product.format


@dataclass
class ProductFamily:
    """
    A group of products sharing a core product name.
    """
    family_key: str  # Extracted core product name
    base: Product  # Representative product used for shared display fields
    variants: List[ProductVariant]
    shared_properties: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.variants:
            raise ValueError(f"Family '{self.family_key}' cannot be built from zero variants")

    @property
    def is_singleton(self) -> bool:
        return len(self.variants) == 1

    @property
    def products(self) -> List[Product]:
        return [variant.product for variant in self.variants]


@dataclass
class PriceRange:
    """
    Lowest and highest variant price of a family.
    """
    min: float
    max: float


@dataclass
class GroupedProduct:
    """
    UI-facing view of a product family.
    """
    base_sku: str
    product_name: str
    category: str
    description: str
    status: str
    featured: bool
    variants: List[ProductVariant]
    default_variant: ProductVariant
    available_formats: List[str]
    format_labels: Dict[str, str]
    price_range: PriceRange
    roast_level: Optional[str] = None
    origin: Any = None
    tasting_notes: List[str] = field(default_factory=list)


@dataclass
class VariantSuggestion:
    """
    A size and format combination a family does not offer yet.
    """
    size: str
    format: str
    suggested_sku: str
