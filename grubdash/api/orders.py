"""
Order endpoints.

Mounted at /orders.
"""

from typing import Any

from fastapi import APIRouter, Body, status
from fastapi.responses import Response

from grubdash.api import build_context, respond
from grubdash.schemas import ERROR_RESPONSES, OrderListResponse, OrderResponse
from grubdash.services import orders

router = APIRouter()

ORDER_EXAMPLE = {
    "data": {
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": "pending",
        "dishes": [{"id": "90c3d873684bf381dfab29034b5bba73", "quantity": 2}],
    }
}


@router.get("", response_model=OrderListResponse, summary="List Orders")
async def list_orders() -> Response:
    """Return every order."""
    return respond(orders.list_chain, build_context())


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Create Order",
)
async def create_order(
    body: Any = Body(None, examples=[ORDER_EXAMPLE]),
) -> Response:
    """
    Place an order from ``{"data": {...}}``.

    deliverTo, mobileNumber and at least one dish are required; every
    dish needs a quantity of at least 1. Status defaults to pending.
    """
    return respond(orders.create_chain, build_context(body))


@router.get("/{order_id}", response_model=OrderResponse, responses=ERROR_RESPONSES, summary="Get Order")
async def read_order(order_id: str) -> Response:
    return respond(orders.read_chain, build_context(order_id=order_id))


@router.put("/{order_id}", response_model=OrderResponse, responses=ERROR_RESPONSES, summary="Update Order")
async def update_order(
    order_id: str,
    body: Any = Body(None, examples=[ORDER_EXAMPLE]),
) -> Response:
    """
    Replace every field of an order except its id.

    Delivered orders cannot be changed. status is required.
    """
    return respond(orders.update_chain, build_context(body, order_id=order_id))


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Delete Order",
)
async def delete_order(order_id: str) -> Response:
    """Delete a pending order."""
    return respond(orders.destroy_chain, build_context(order_id=order_id))
