"""
Main entry point for the catalog application.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from voyage_catalog.analysis.exporters.csv_exporter import CSVExporter
from voyage_catalog.analysis.families.base_grouper import BaseFamilyGrouper
from voyage_catalog.analysis.families.grouper_factory import GrouperFactory
from voyage_catalog.analysis.families.name_grouper import NameFamilyGrouper
from voyage_catalog.analysis.families.view_models import build_grouped_product
from voyage_catalog.config.app_config import MAX_REPORTED_ERRORS
from voyage_catalog.config.storage_config import get_blob_config
from voyage_catalog.data.connectors.base_connector import BaseBlobConnector
from voyage_catalog.data.connectors.local_blob_connector import LocalBlobConnector
from voyage_catalog.data.models.family import GroupedProduct, ProductFamily
from voyage_catalog.data.models.imports import UploadSummary
from voyage_catalog.data.models.product import Product
from voyage_catalog.data.repositories.product_repository import ProductRepository
from voyage_catalog.exceptions import CsvUploadError, ProductDataError
from voyage_catalog.ingestion.csv_importer import import_products_csv
from voyage_catalog.ingestion.product_validator import validate_products_data
from voyage_catalog.utils.date_helpers import get_timestamp_str
from voyage_catalog.utils.logging_config import setup_logging
from voyage_catalog.utils.validation import validate_upload


class CatalogApp:
    """
    Main application class for catalog administration.
    """

    def __init__(
        self,
        store_root: Optional[str] = None,
        connector: Optional[BaseBlobConnector] = None,
        log_level=logging.INFO
    ):
        """
        Initialize the application.

        Args:
            store_root (Optional[str]): Blob store directory, overriding CATALOG_BLOB_ROOT
            connector (Optional[BaseBlobConnector]): Blob connector to use instead of the local one
            log_level: Logging level
        """
        # Set up logging
        self.logger = setup_logging(log_level=log_level)

        # Initialize blob connector
        if connector is None:
            config = get_blob_config()
            if store_root:
                config["root"] = store_root
            connector = LocalBlobConnector(config)
        self.connector = connector

        # Initialize repository
        self.product_repository = ProductRepository(self.connector)
        self.grouper_factory = GrouperFactory()

    def import_upload(self, file_name: str, content: Union[str, bytes]) -> UploadSummary:
        """
        Replace the catalog with the products of an uploaded CSV.

        The raw upload is archived as ``products_<timestamp>.csv`` and the
        normalized catalog is written to ``products.csv`` and ``products.json``.

        Args:
            file_name (str): Name of the uploaded file
            content (Union[str, bytes]): Raw file content

        Returns:
            UploadSummary: Counts, blob URLs and capped row diagnostics

        Raises:
            CsvUploadError: If the file is rejected or no row maps to a product
        """
        csv_text = validate_upload(file_name, content)
        result = import_products_csv(csv_text)

        self.logger.info(
            f"CSV upload processed: {result.total_rows} rows, {result.success_count} products, "
            f"{result.error_count} errors"
        )

        if not result.products:
            raise CsvUploadError(
                "No valid products could be processed from CSV",
                processing_errors=result.errors[:MAX_REPORTED_ERRORS],
            )

        archive_blob = self.product_repository.archive_upload(csv_text, get_timestamp_str())
        json_blob = self.product_repository.save_json(result.products)
        main_csv_blob = self.product_repository.save_all(result.products)

        categories: List[str] = []
        for product in result.products:
            if product.category not in categories:
                categories.append(product.category)

        self.logger.info(f"Catalog replaced from {file_name}; archived upload at {archive_blob.key}")

        return UploadSummary(
            product_count=result.success_count,
            csv_url=archive_blob.url,
            json_url=json_blob.url,
            main_csv_url=main_csv_blob.url,
            message=f"Successfully processed {result.success_count} products",
            processing_errors=list(result.errors),
            categories=categories,
            total_rows=result.total_rows,
        )

    def export_catalog(self, output_path: Optional[str] = None) -> str:
        """
        Export the catalog as canonical CSV.

        Args:
            output_path (Optional[str]): File to write; the CSV text is only returned if None

        Returns:
            str: The CSV text
        """
        exporter = CSVExporter()
        products = self.product_repository.get_all(bust_cache=True)
        if output_path:
            exporter.export(products, output_path)
        return exporter.render(products)

    def get_grouper(self, mode: str) -> BaseFamilyGrouper:
        grouper = self.grouper_factory.get_grouper(mode)
        if grouper is None:
            raise ValueError(f"Unknown grouping mode: {mode}. Expected one of {self.grouper_factory.modes}")
        return grouper

    def storefront_catalog(self) -> Tuple[List[GroupedProduct], List[Product]]:
        """
        Build the storefront view: variant families and standalone products.

        Returns:
            Tuple[List[GroupedProduct], List[Product]]: Grouped families and the
                products that are not part of any family
        """
        grouper = NameFamilyGrouper()
        families, standalone = grouper.split_catalog(self.product_repository.get_all())
        return [build_grouped_product(family) for family in families], standalone

    def group_catalog(self, mode: str = "storefront") -> List[ProductFamily]:
        """
        Group the catalog with the grouper of a mode.

        Args:
            mode (str): Grouping mode ('storefront', 'admin')

        Returns:
            List[ProductFamily]: The families found
        """
        families = self.get_grouper(mode).group(self.product_repository.get_all())
        self.logger.info(f"Grouped catalog in {mode} mode: {len(families)} families")
        return families

    def validate_json_file(self, path: str) -> List[Product]:
        """
        Validate a JSON product payload stored in a file.

        Args:
            path (str): Path of the JSON file

        Returns:
            List[Product]: The valid products

        Raises:
            ProductDataError: If the file is not JSON or holds no valid product
        """
        try:
            data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ProductDataError(f"{path} is not valid JSON: {e}") from e
        return validate_products_data(data)

    def close(self) -> None:
        try:
            self.connector.disconnect()
        except Exception as e:
            self.logger.error(f"Error closing blob store: {str(e)}")


def summarize_families(families: List[ProductFamily]) -> List[Dict[str, Any]]:
    """
    Flatten families into printable rows.

    Args:
        families (List[ProductFamily]): Families to summarize

    Returns:
        List[Dict[str, Any]]: One row per family
    """
    return [
        {
            "family": family.family_key,
            "base_sku": family.base.sku,
            "skus": [variant.sku for variant in family.variants],
            "formats": [variant.format_code for variant in family.variants],
            "shared": sorted(family.shared_properties),
        }
        for family in families
    ]


def run_import(
    csv_path: str,
    store_root: Optional[str] = None,
    log_level: int = logging.INFO
) -> UploadSummary:
    """
    Import a catalog CSV file into the blob store.

    Args:
        csv_path (str): Path of the CSV file
        store_root (Optional[str]): Blob store directory
        log_level (int): Logging level

    Returns:
        UploadSummary: Outcome of the upload
    """
    path = Path(csv_path)
    app = CatalogApp(store_root=store_root, log_level=log_level)
    try:
        return app.import_upload(path.name, path.read_bytes())
    finally:
        app.close()


if __name__ == "__main__":
    import sys

    summary = run_import(sys.argv[1])
    print(f"{summary.message}. Catalog saved at {summary.main_csv_url}")
