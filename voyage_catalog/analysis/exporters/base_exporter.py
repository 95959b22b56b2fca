"""
Base exporter interface for writing catalog products.
"""
from abc import ABC, abstractmethod
import os
from typing import List
from voyage_catalog.data.models.product import Product
from voyage_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class BaseExporter(ABC):
    """
    Abstract base class for exporters that serialize catalog products.
    """

    # File extension of the rendered output
    extension: str = ""

    @abstractmethod
    def render(self, products: List[Product]) -> str:
        """
        Serialize products to text.

        Args:
            products (List[Product]): Products to serialize

        Returns:
            str: The serialized catalog
        """
        pass

    def export(self, products: List[Product], output_path: str) -> str:
        """
        Serialize products and write them to a file.

        Args:
            products (List[Product]): Products to serialize
            output_path (str): Destination file path

        Returns:
            str: Path to the exported file
        """
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(self.render(products))

        logger.info(f"Exported {len(products)} products to {output_path}")
        return output_path
