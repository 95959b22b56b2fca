"""
Exception hierarchy for the catalog pipeline.

Row-level failures (``RowMappingError``) are caught by the bulk importer and
reported per row. Batch-level failures (``CsvUploadError``,
``ProductDataError``) abort the operation and are meant to be translated into
400-class responses by the caller.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""
    pass


class RowMappingError(CatalogError):
    """Raised when a single CSV row cannot be mapped to a product."""
    pass


class CsvUploadError(CatalogError, ValueError):
    """Raised when an uploaded CSV is structurally unusable."""

    def __init__(self, message, processing_errors=None):
        super().__init__(message)
        # Capped per-row diagnostics, when the failure comes from the rows themselves
        self.processing_errors = list(processing_errors or [])


class ProductDataError(CatalogError, ValueError):
    """Raised when a JSON product payload has no usable products."""
    pass


class ProductNotFoundError(CatalogError, KeyError):
    """Raised when a product lookup by SKU fails."""
    pass
