"""
Validation of product payloads that arrive as JSON instead of CSV.

Three payload shapes are accepted:

* a bare list of products;
* an object wrapping the list under ``"products"``;
* a keyed map whose values are products (anything with a ``sku`` key).

Entries that fail validation are skipped and logged, mirroring the CSV
importer; a payload with no valid entry at all is rejected.
"""
from datetime import datetime
import math
from typing import Any, Dict, Iterable, List, Optional
from voyage_catalog.config.app_config import DEFAULT_STATUS, STATUSES
from voyage_catalog.data.models.product import BundleItem, Product
from voyage_catalog.exceptions import ProductDataError
from voyage_catalog.ingestion.value_normalizers import (
    normalize_bool,
    normalize_category,
    normalize_int,
    normalize_tasting_notes,
    process_multiple_origins,
)
from voyage_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


def _extract_candidates(data: Any) -> List[Any]:
    if isinstance(data, list):
        logger.debug(f"Products data is array format: {len(data)} entries")
        return data

    if isinstance(data, dict):
        if isinstance(data.get("products"), list):
            logger.debug(f"Products data is wrapped format: {len(data['products'])} entries")
            return data["products"]

        candidates = [item for item in data.values() if isinstance(item, dict) and "sku" in item]
        logger.debug(f"Products data is keyed object format: {len(data)} keys, {len(candidates)} products")
        return candidates

    raise ProductDataError(
        f"Invalid products data type: {type(data).__name__}. "
        "Expected array, object with 'products' key, or keyed object."
    )


def _parse_price(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    value = float(value)
    if math.isnan(value) or math.isinf(value) or value < 0:
        return None
    return value


def _optional_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    return datetime.now()


def _parse_bundle(items: Any) -> List[BundleItem]:
    if not isinstance(items, list):
        return []
    bundle = []
    for item in items:
        if not isinstance(item, dict) or not item.get("sku"):
            continue
        quantity = normalize_int(item.get("quantity"))
        bundle.append(BundleItem(
            sku=str(item["sku"]),
            quantity=quantity if quantity is not None else 1,
            unit_price=_optional_number(item.get("unitPrice")) or 0.0,
            notes=item.get("notes"),
        ))
    return bundle


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def validate_product(item: Any, index: int) -> Optional[Product]:
    """
    Validate one JSON product entry.

    Args:
        item (Any): Candidate entry
        index (int): Position of the entry, for diagnostics

    Returns:
        Optional[Product]: The typed product, or None if the entry is invalid
    """
    if not isinstance(item, dict):
        logger.error(f"Invalid product at index {index}: not an object")
        return None

    sku = item.get("sku")
    if not isinstance(sku, str) or not sku.strip():
        logger.error(f"Invalid product at index {index}: missing or invalid SKU")
        return None

    # Legacy payloads use 'name' instead of 'productName'
    product_name = item.get("productName") or item.get("name")
    if not isinstance(product_name, str) or not product_name.strip():
        logger.error(f"Invalid product at index {index}: missing or invalid name/productName (sku={sku})")
        return None

    price = _parse_price(item.get("price"))
    if price is None:
        logger.error(f"Invalid product at index {index}: invalid price {item.get('price')!r} (sku={sku})")
        return None

    status = item.get("status")
    if status not in STATUSES:
        status = DEFAULT_STATUS

    product = Product(
        sku=sku.strip(),
        product_name=product_name.strip(),
        category=normalize_category(item.get("category")),
        price=price,
        description=item.get("description") if isinstance(item.get("description"), str) else "",
        featured=normalize_bool(item.get("featured")),
        status=status,
        in_stock=item.get("inStock") is not False,
        roast_level=_text(item.get("roastLevel")),
        origin=process_multiple_origins(item.get("origin")),
        blend_composition=_text(item.get("blendComposition")),
        format=_text(item.get("format")),
        weight=_text(item.get("weight")),
        tasting_notes=normalize_tasting_notes(item.get("tastingNotes")),
        billing_interval=_text(item.get("billingInterval")),
        delivery_frequency=_text(item.get("deliveryFrequency")),
        trial_period_days=normalize_int(item.get("trialPeriodDays")),
        max_deliveries=normalize_int(item.get("maxDeliveries")),
        enable_notification_banner=(
            normalize_bool(item["enableNotificationBanner"]) if "enableNotificationBanner" in item else None
        ),
        notification_message=_text(item.get("notificationMessage")),
        bundle_type=_text(item.get("bundleType")),
        bundle_contents=_parse_bundle(item.get("bundleContents")),
        bundle_description=_text(item.get("bundleDescription")),
        gift_message=_text(item.get("giftMessage")),
        packaging_type=_text(item.get("packagingType")),
        seasonal_availability=_text(item.get("seasonalAvailability")),
        original_price=_optional_number(item.get("originalPrice")),
        shipping_first=_optional_number(item.get("shippingFirst")),
        shipping_additional=_optional_number(item.get("shippingAdditional")),
        created_at=_parse_timestamp(item.get("createdAt")),
        updated_at=_parse_timestamp(item.get("updatedAt")),
    )
    if isinstance(item.get("id"), str) and item["id"]:
        product.id = item["id"]

    return product


def validate_products_data(data: Any) -> List[Product]:
    """
    Validate and normalize a JSON product payload.

    Args:
        data (Any): Decoded JSON payload

    Returns:
        List[Product]: Non-empty list of typed products

    Raises:
        ProductDataError: If the payload is missing, has an unsupported shape,
            contains no candidates, or no candidate is valid
    """
    if data is None:
        raise ProductDataError("Products data is null or undefined")

    candidates = _extract_candidates(data)
    if not candidates:
        raise ProductDataError("Products array is empty after normalization")

    products = []
    for index, item in enumerate(candidates):
        product = validate_product(item, index)
        if product is not None:
            products.append(product)

    if not products:
        raise ProductDataError("No valid products found after validation")

    logger.info(
        f"Product validation complete: {len(candidates)} input, {len(products)} valid, "
        f"{len(candidates) - len(products)} skipped"
    )
    return products


def validate_products_for_checkout(products: Iterable[Product], required_skus: Iterable[str]) -> None:
    """
    Ensure every SKU of an order exists in the catalog.

    Args:
        products (Iterable[Product]): Current catalog
        required_skus (Iterable[str]): SKUs referenced by the order

    Raises:
        ProductDataError: If any SKU is not in the catalog
    """
    available: Dict[str, Product] = {product.sku: product for product in products}
    missing = [sku for sku in required_skus if sku not in available]
    if missing:
        raise ProductDataError(f"Products not found for SKUs: {', '.join(missing)}")
