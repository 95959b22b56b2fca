"""
Product repository for the blob-backed catalog.
"""
import json
import re
import time
from typing import Callable, List, Optional
from voyage_catalog.analysis.exporters.csv_exporter import export_products_to_csv
from voyage_catalog.analysis.exporters.json_exporter import JSONExporter
from voyage_catalog.config.app_config import CACHE_SECONDS
from voyage_catalog.config.storage_config import (
    PRODUCTS_BLOB_KEY,
    PRODUCTS_JSON_BLOB_KEY,
    UPLOAD_ARCHIVE_PREFIX,
)
from voyage_catalog.data.connectors.base_connector import BaseBlobConnector
from voyage_catalog.data.models.blob import BlobObject
from voyage_catalog.data.models.product import Product
from voyage_catalog.data.repositories.base_repository import BaseRepository
from voyage_catalog.exceptions import CsvUploadError, ProductDataError, ProductNotFoundError
from voyage_catalog.ingestion.csv_importer import import_products_csv
from voyage_catalog.ingestion.product_validator import validate_products_data
from voyage_catalog.utils.date_helpers import get_timestamp_str
from voyage_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# A products blob that opens like JSON was written to the CSV key by mistake
_JSON_CONTENT = re.compile(r"^\s*[\[{]")


class ProductRepository(BaseRepository[Product]):
    """
    Repository for the catalog stored as ``products.csv``.

    Reads are cached for ``cache_seconds``; every write through the
    repository invalidates the cache. Concurrent writers are last-write-wins.
    """

    def __init__(
        self,
        connector: BaseBlobConnector,
        cache_seconds: int = CACHE_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize the product repository.

        Args:
            connector (BaseBlobConnector): The blob connector to use
            cache_seconds (int): Lifetime of cached reads, 0 to disable
            clock (Callable[[], float]): Monotonic time source
        """
        super().__init__(connector)
        self.cache_seconds = cache_seconds
        self._clock = clock
        self._cache: Optional[List[Product]] = None
        self._cached_at = 0.0

    def invalidate_cache(self) -> None:
        self._cache = None

    def get_all(self, bust_cache: bool = False) -> List[Product]:
        """
        Get every catalog product.

        Args:
            bust_cache (bool): Skip the cache and read the blob

        Returns:
            List[Product]: Catalog products, empty when nothing usable is stored
        """
        now = self._clock()
        if not bust_cache and self._cache is not None and now - self._cached_at < self.cache_seconds:
            logger.debug("Returning products from cache")
            return list(self._cache)

        self._cache = self._load_products()
        self._cached_at = now
        return list(self._cache)

    def _load_products(self) -> List[Product]:
        csv_text = self._read_blob(PRODUCTS_BLOB_KEY)

        if csv_text is None:
            logger.warning(f"No {PRODUCTS_BLOB_KEY} blob found, catalog is empty")
            return []

        if not csv_text.strip():
            logger.error(f"{PRODUCTS_BLOB_KEY} exists but is empty")
            return []

        if _JSON_CONTENT.match(csv_text):
            logger.error(f"JSON detected in {PRODUCTS_BLOB_KEY}; treating catalog as empty: {csv_text[:200]!r}")
            return []

        try:
            result = import_products_csv(csv_text)
        except CsvUploadError as e:
            logger.error(f"Stored catalog is unreadable: {str(e)}")
            return []

        if not result.products:
            logger.info(f"{PRODUCTS_BLOB_KEY} has no products ({result.total_rows} data rows)")
        return result.products

    def get_by_sku(self, sku: str) -> Optional[Product]:
        for product in self.get_all():
            if product.sku == sku:
                return product
        return None

    def save_all(self, products: List[Product]) -> BlobObject:
        """
        Replace the stored catalog.

        An empty list stores a header-only CSV, ready for the next upload.

        Args:
            products (List[Product]): The full catalog

        Returns:
            BlobObject: The written ``products.csv`` blob

        Raises:
            ProductDataError: If two products share a SKU
        """
        skus = [product.sku for product in products]
        duplicates = sorted({sku for sku in skus if skus.count(sku) > 1})
        if duplicates:
            raise ProductDataError(f"Duplicate SKUs in catalog: {', '.join(duplicates)}")

        csv_text = export_products_to_csv(products)
        blob = self.connector.put(PRODUCTS_BLOB_KEY, csv_text)
        self.invalidate_cache()

        if products:
            logger.info(f"Saved {len(products)} products to {blob.key}")
        else:
            logger.info(f"Saved empty catalog (header only) to {blob.key}")
        return blob

    def save_json(self, products: List[Product]) -> BlobObject:
        """
        Write the JSON snapshot of the catalog.

        Args:
            products (List[Product]): The full catalog

        Returns:
            BlobObject: The written ``products.json`` blob
        """
        blob = self.connector.put(PRODUCTS_JSON_BLOB_KEY, JSONExporter().render(products))
        logger.info(f"Saved JSON snapshot of {len(products)} products to {blob.key}")
        return blob

    def archive_upload(self, csv_text: str, timestamp: Optional[str] = None) -> BlobObject:
        """
        Keep the raw text of an uploaded CSV under a timestamped key.

        Args:
            csv_text (str): Uploaded CSV, as received
            timestamp (Optional[str]): Key timestamp, now if None

        Returns:
            BlobObject: The archived blob
        """
        key = f"{UPLOAD_ARCHIVE_PREFIX}{timestamp or get_timestamp_str()}.csv"
        return self.connector.put(key, csv_text)

    def load_products_json(self) -> List[Product]:
        """
        Read and validate the JSON snapshot.

        Returns:
            List[Product]: Validated products, empty if no snapshot exists

        Raises:
            ProductDataError: If the snapshot is not valid JSON or has no valid product
        """
        json_text = self._read_blob(PRODUCTS_JSON_BLOB_KEY)
        if json_text is None:
            logger.warning(f"No {PRODUCTS_JSON_BLOB_KEY} blob found")
            return []

        try:
            data = json.loads(json_text)
        except json.JSONDecodeError as e:
            raise ProductDataError(f"{PRODUCTS_JSON_BLOB_KEY} is not valid JSON: {e}") from e

        return validate_products_data(data)

    def add_product(self, product: Product) -> None:
        """
        Add a product to the catalog.

        Raises:
            ProductDataError: If the SKU is already in the catalog
        """
        products = self.get_all(bust_cache=True)
        if any(existing.sku == product.sku for existing in products):
            raise ProductDataError(f"Product with SKU {product.sku} already exists")
        products.append(product)
        self.save_all(products)

    def delete_product(self, sku: str) -> bool:
        """
        Remove a product from the catalog.

        Args:
            sku (str): SKU to remove

        Returns:
            bool: True if a product was removed
        """
        products = self.get_all(bust_cache=True)
        remaining = [product for product in products if product.sku != sku]
        if len(remaining) == len(products):
            logger.warning(f"Delete requested for unknown SKU {sku}")
            return False
        self.save_all(remaining)
        return True

    def update_product(self, updated: Product) -> None:
        """
        Replace the catalog product with the same SKU.

        Args:
            updated (Product): New version of the product

        Raises:
            ProductNotFoundError: If no product has the SKU
        """
        products = self.get_all(bust_cache=True)
        for index, product in enumerate(products):
            if product.sku == updated.sku:
                products[index] = updated
                self.save_all(products)
                return
        raise ProductNotFoundError(f"Product not found for update: {updated.sku}")
