"""
JSON exporter for the products.json catalog blob.
"""
import json
from typing import List
from voyage_catalog.analysis.exporters.base_exporter import BaseExporter
from voyage_catalog.data.models.product import Product


class JSONExporter(BaseExporter):
    """
    Exporter for the camelCase JSON catalog.
    """

    extension = ".json"

    def __init__(self, indent: int = 2):
        self.indent = indent

    def render(self, products: List[Product]) -> str:
        return json.dumps([product.to_dict() for product in products], indent=self.indent, ensure_ascii=False)
