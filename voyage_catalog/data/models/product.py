"""
Product data models.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union
import uuid


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class BundleItem:
    """
    Represents one line of a gift bundle (``SKU:QTY:PRICE``).
    """
    sku: str
    quantity: int = 1
    unit_price: float = 0.0
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"sku": self.sku, "quantity": self.quantity, "unitPrice": self.unit_price}
        if self.notes:
            data["notes"] = self.notes
        return data


@dataclass
class Product:
    """
    Represents a single sellable catalog unit identified by its SKU.
    """
    sku: str
    product_name: str
    price: float
    category: str = "coffee"
    id: str = field(default_factory=_new_id)
    original_price: Optional[float] = None
    description: str = ""
    featured: bool = False
    status: str = "active"
    in_stock: bool = True

    # Coffee attributes
    roast_level: Optional[str] = None
    origin: Optional[Union[str, List[str]]] = None  # A list marks a multi-origin blend
    blend_composition: Optional[str] = None  # e.g. "60% Colombian, 40% Brazilian"
    format: Optional[str] = None
    weight: Optional[str] = None
    tasting_notes: List[str] = field(default_factory=list)

    # Subscription attributes
    billing_interval: Optional[str] = None
    delivery_frequency: Optional[str] = None
    trial_period_days: Optional[int] = None
    max_deliveries: Optional[int] = None
    enable_notification_banner: Optional[bool] = None
    notification_message: Optional[str] = None

    # Gift bundle attributes
    bundle_type: Optional[str] = None
    bundle_contents: List[BundleItem] = field(default_factory=list)
    bundle_description: Optional[str] = None
    gift_message: Optional[str] = None
    packaging_type: Optional[str] = None
    seasonal_availability: Optional[str] = None

    # Shipping overrides
    shipping_first: Optional[float] = None
    shipping_additional: Optional[float] = None

    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def origins(self) -> List[str]:
        """Origin as a list, whether one region or a blend."""
        if not self.origin:
            return []
        if isinstance(self.origin, list):
            return list(self.origin)
        return [self.origin]

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the product to the camelCase JSON shape of ``products.json``.

        Optional attributes that are unset are omitted.

        Returns:
            Dict[str, Any]: JSON-ready product dictionary
        """
        data: Dict[str, Any] = {
            "id": self.id,
            "sku": self.sku,
            "productName": self.product_name,
            "category": self.category,
            "price": self.price,
            "description": self.description,
            "featured": self.featured,
            "status": self.status,
            "inStock": self.in_stock,
            "tastingNotes": list(self.tasting_notes),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

        optional = {
            "originalPrice": self.original_price,
            "roastLevel": self.roast_level,
            "origin": list(self.origin) if isinstance(self.origin, list) else self.origin,
            "blendComposition": self.blend_composition,
            "format": self.format,
            "weight": self.weight,
            "billingInterval": self.billing_interval,
            "deliveryFrequency": self.delivery_frequency,
            "trialPeriodDays": self.trial_period_days,
            "maxDeliveries": self.max_deliveries,
            "enableNotificationBanner": self.enable_notification_banner,
            "notificationMessage": self.notification_message,
            "bundleType": self.bundle_type,
            "bundleDescription": self.bundle_description,
            "giftMessage": self.gift_message,
            "packagingType": self.packaging_type,
            "seasonalAvailability": self.seasonal_availability,
            "shippingFirst": self.shipping_first,
            "shippingAdditional": self.shipping_additional,
        }
        for key, value in optional.items():
            if value is not None:
                data[key] = value

        if self.bundle_contents:
            data["bundleContents"] = [item.to_dict() for item in self.bundle_contents]

        return data
