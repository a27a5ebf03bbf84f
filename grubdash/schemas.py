"""
Pydantic Schemas for API Documentation

Describe the request and response bodies in the OpenAPI document.
Bodies are validated by the service chains, which produce the
client-facing messages, so these models are not applied at runtime.

Version: 1.0.0
"""

from datetime import datetime
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from grubdash.models import OrderStatus

# Whole numbers are the norm; non-integral numbers of at least 1 are also
# accepted, and integers keep their exact value at any size.
Amount = Union[Annotated[int, Field(ge=1)], Annotated[float, Field(ge=1)]]


# =============================================================================
# DISHES
# =============================================================================

class DishFields(BaseModel):
    """Client-supplied dish fields."""
    id: Optional[str] = Field(None, description="Must match the route id when supplied on update")
    name: str = Field(..., examples=["Pasta"])
    description: str = Field(..., examples=["Fresh spaghetti with basil"])
    image_url: str = Field(..., examples=["https://example.com/pasta.jpg"])
    price: Amount = Field(..., examples=[12])


class Dish(DishFields):
    id: str


class DishResponse(BaseModel):
    data: Dish


class DishListResponse(BaseModel):
    data: List[Dish]


# =============================================================================
# ORDERS
# =============================================================================

class OrderLineItem(BaseModel):
    """A dish reference with a quantity. Other dish fields may be embedded."""
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = Field(None, examples=["3c637d011d844ebab1205fef8a7e36ea"])
    quantity: Amount = Field(..., examples=[2])


class OrderFields(BaseModel):
    """Client-supplied order fields."""
    id: Optional[str] = Field(None, description="Must match the route id when supplied on update")
    deliverTo: str = Field(..., examples=["308 Negra Arroyo Lane, Albuquerque, NM"])
    mobileNumber: str = Field(..., examples=["(505) 143-3369"])
    status: OrderStatus = Field(OrderStatus.PENDING, examples=["pending"])
    dishes: List[OrderLineItem] = Field(..., min_length=1)


class Order(OrderFields):
    id: str


class OrderResponse(BaseModel):
    data: Order


class OrderListResponse(BaseModel):
    data: List[Order]


# =============================================================================
# SYSTEM
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    status: int
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    dishes: int
    orders: int
    timestamp: datetime


ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}
