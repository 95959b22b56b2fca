"""
Import result data models.
"""
from dataclasses import dataclass, field
from typing import List, Optional
from voyage_catalog.data.models.product import Product


@dataclass
class ImportResult:
    """
    Outcome of a bulk CSV import.
    """
    products: List[Product] = field(default_factory=list)
    total_rows: int = 0
    errors: List[str] = field(default_factory=list)  # Capped list of "Row N: reason" messages
    error_count: int = 0  # Uncapped number of rejected rows
    warnings: List[str] = field(default_factory=list)  # Fallback defaults applied to accepted rows

    @property
    def success_count(self) -> int:
        return len(self.products)


@dataclass
class UploadSummary:
    """
    Outcome of an admin CSV upload after the catalog has been written back.
    """
    product_count: int
    csv_url: str
    json_url: str
    main_csv_url: str
    message: str
    processing_errors: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    total_rows: Optional[int] = None
