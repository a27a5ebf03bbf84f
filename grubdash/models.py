"""
Domain Models

Dishes and orders as held in the in-memory stores. Entities are mutable
records: update handlers overwrite their fields in place, and every
holder of a reference sees the change.

Version: 1.0.0
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Union


class OrderStatus(str, enum.Enum):
    """Order status workflow. DELIVERED is terminal."""
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return isinstance(value, str) and value in cls.values()


@dataclass
class Dish:
    """
    A menu dish.

    Attributes:
        id: Generated identifier, never changed after creation
        name: Display name
        description: Menu description
        image_url: Picture of the dish
        price: Whole currency units, at least 1. Ints are stored exactly;
            non-integral numbers are accepted too
    """
    id: str
    name: str
    description: str
    image_url: str
    price: Union[int, float]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "image_url": self.image_url,
            "price": self.price,
        }


@dataclass
class Order:
    """
    A delivery order.

    Line items are kept as submitted by the client: each carries the id of
    a dish and a quantity, and may embed other dish fields.

    Attributes:
        id: Generated identifier, never changed after creation
        deliverTo: Delivery address
        mobileNumber: Customer contact number
        status: One of OrderStatus values
        dishes: Non-empty list of line items
    """
    id: str
    deliverTo: str
    mobileNumber: str
    status: str = OrderStatus.PENDING.value
    dishes: list[dict[str, Any]] = field(default_factory=list)

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING.value

    @property
    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "deliverTo": self.deliverTo,
            "mobileNumber": self.mobileNumber,
            "status": self.status,
            "dishes": self.dishes,
        }
