"""
Voyage Catalog Package.

This package provides the catalog core of the Voyage coffee storefront:
CSV ingestion with tolerant header matching, product validation, product
family grouping and catalog export.
"""
from voyage_catalog.main import CatalogApp, run_import

__version__ = "1.0.0"
