"""
CSV exporter for catalog products.
"""
from typing import Any, Dict, List, Optional
import pandas as pd
from voyage_catalog.analysis.exporters.base_exporter import BaseExporter
from voyage_catalog.config.app_config import CSV_COLUMNS
from voyage_catalog.data.models.product import BundleItem, Product


def _money(value: Optional[float]) -> str:
    return "" if value is None else f"{value:.2f}"


def _flag(value: Optional[bool]) -> str:
    if value is None:
        return ""
    return "TRUE" if value else "FALSE"


def _optional(value: Any) -> str:
    return "" if value is None else str(value)


def _join(values) -> str:
    if not values:
        return ""
    if isinstance(values, str):
        return values
    return ", ".join(values)


def _bundle(items: List[BundleItem]) -> str:
    entries = []
    for item in items:
        entry = f"{item.sku}:{item.quantity}:{item.unit_price:.2f}"
        if item.notes:
            entry += f":{item.notes}"
        entries.append(entry)
    return ",".join(entries)


class CSVExporter(BaseExporter):
    """
    Exporter for the canonical catalog CSV layout.
    """

    extension = ".csv"

    def product_to_row(self, product: Product) -> Dict[str, str]:
        """
        Flatten a product into canonical CSV cells.

        Args:
            product (Product): The product to flatten

        Returns:
            Dict[str, str]: Cell text keyed by canonical header
        """
        return {
            "SKU": product.sku,
            "PRODUCTNAME": product.product_name,
            "CATEGORY": product.category,
            "PRICE": _money(product.price),
            "ORIGINAL PRICE": _money(product.original_price),
            "DESCRIPTION": product.description or "",
            "FEATURED": _flag(product.featured),
            "STATUS": product.status,
            "ROAST LEVEL": _optional(product.roast_level),
            "ORIGIN": _join(product.origin),
            "BLEND COMPOSITION": _optional(product.blend_composition),
            "FORMAT": _optional(product.format),
            "WEIGHT": _optional(product.weight),
            "TASTING NOTES": _join(product.tasting_notes),
            "SHIPPINGFIRST": _money(product.shipping_first),
            "SHIPPINGADDITIONAL": _money(product.shipping_additional),
            "BILLING INTERVAL": _optional(product.billing_interval),
            "DELIVERY FREQUENCY": _optional(product.delivery_frequency),
            "TRIAL PERIOD DAYS": _optional(product.trial_period_days),
            "MAX DELIVERIES": _optional(product.max_deliveries),
            "ENABLE NOTIFICATION BANNER": _flag(product.enable_notification_banner),
            "NOTIFICATION MESSAGE": _optional(product.notification_message),
            "BUNDLE TYPE": _optional(product.bundle_type),
            "BUNDLE CONTENTS": _bundle(product.bundle_contents),
            "BUNDLE DESCRIPTION": _optional(product.bundle_description),
            "GIFT MESSAGE": _optional(product.gift_message),
            "PACKAGING TYPE": _optional(product.packaging_type),
            "SEASONAL AVAILABILITY": _optional(product.seasonal_availability),
            "IN STOCK": _flag(product.in_stock),
        }

    def prepare_dataframe(self, products: List[Product]) -> pd.DataFrame:
        """
        Prepare a DataFrame with one row per product in canonical column order.

        Args:
            products (List[Product]): Products to export

        Returns:
            pd.DataFrame: The catalog table, empty but fully headed for no products
        """
        rows = [self.product_to_row(product) for product in products]
        return pd.DataFrame(rows, columns=CSV_COLUMNS)

    def render(self, products: List[Product]) -> str:
        return self.prepare_dataframe(products).to_csv(index=False, lineterminator="\n")


def export_products_to_csv(products: List[Product]) -> str:
    """
    Serialize products to the canonical catalog CSV.

    Args:
        products (List[Product]): Products to serialize

    Returns:
        str: CSV text with a header row; header only when there are no products
    """
    return CSVExporter().render(products)
