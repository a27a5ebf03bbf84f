"""
Order Service

Validation chains and terminal handlers for the order collection.

Status workflow:
    pending -> preparing -> out-for-delivery -> delivered

Any of the four statuses may be set on creation or update, but once an
order is delivered it can no longer be changed. Only pending orders can
be deleted.

Chains:
    list:    handler only
    create:  presence x3, line items, status value, create
    read:    existence, read
    update:  existence, id match, status transition, presence x3, line items, update
    destroy: existence, pending guard, destroy

Version: 1.0.0
"""

import logging
from typing import Mapping

from grubdash.core.exceptions import ValidationError
from grubdash.models import Order, OrderStatus
from grubdash.services.pipeline import Chain, HandlerResult, RequestContext
from grubdash.services.validation import (
    body_has,
    entity_exists,
    id_matches_route,
    is_positive_number,
    is_present,
)
from grubdash.store import get_order_store
from grubdash.utils import next_id

logger = logging.getLogger(__name__)

RESOURCE = "Order"
FIELDS = ("deliverTo", "mobileNumber", "dishes")
STATUS_MESSAGE = f"{RESOURCE} must have a status of {', '.join(OrderStatus.values())}"


# =============================================================================
# VALIDATIONS
# =============================================================================

def validate_line_items(ctx: RequestContext) -> None:
    """
    ``dishes`` must be a non-empty list whose items each carry a
    quantity of at least 1. Only the first bad item is reported.
    """
    dishes = ctx.payload.get("dishes")
    if not isinstance(dishes, list) or not dishes:
        raise ValidationError(f"{RESOURCE} must include at least one dish")

    for index, item in enumerate(dishes):
        quantity = item.get("quantity") if isinstance(item, Mapping) else None
        if not is_positive_number(quantity):
            raise ValidationError(
                f"dish {index} must have a quantity that is an integer greater than 0"
            )


def validate_status_value(ctx: RequestContext) -> None:
    """On create, a supplied status must be one of the known values."""
    status = ctx.payload.get("status")
    if is_present(status) and not OrderStatus.is_valid(status):
        raise ValidationError(STATUS_MESSAGE)


def validate_status_transition(ctx: RequestContext) -> None:
    """Delivered orders are frozen; otherwise the new status must be valid."""
    if ctx.order.is_delivered:
        raise ValidationError("A delivered order cannot be changed")
    if not OrderStatus.is_valid(ctx.payload.get("status")):
        raise ValidationError(STATUS_MESSAGE)


def require_pending(ctx: RequestContext) -> None:
    if not ctx.order.is_pending:
        raise ValidationError("An order cannot be deleted unless it is pending")


order_exists = entity_exists(get_order_store, "order_id", "order", "Order id not found")
order_id_matches_route = id_matches_route(RESOURCE, "order", "order_id")
required_fields = [body_has(RESOURCE, name) for name in FIELDS]


# =============================================================================
# HANDLERS
# =============================================================================

def list_orders(ctx: RequestContext) -> HandlerResult:
    return HandlerResult(data=[order.to_dict() for order in get_order_store().list()])


def create_order(ctx: RequestContext) -> HandlerResult:
    payload = ctx.payload
    status = payload.get("status")
    order = Order(
        id=next_id(),
        deliverTo=payload["deliverTo"],
        mobileNumber=payload["mobileNumber"],
        status=status if is_present(status) else OrderStatus.PENDING.value,
        dishes=payload["dishes"],
    )
    get_order_store().insert(order)
    logger.info(f"Order {order.id} created with {len(order.dishes)} dish(es), status {order.status}")
    return HandlerResult(status_code=201, data=order.to_dict())


def read_order(ctx: RequestContext) -> HandlerResult:
    return HandlerResult(data=ctx.order.to_dict())


def update_order(ctx: RequestContext) -> HandlerResult:
    """Overwrite every field except id on the resolved order."""
    payload = ctx.payload
    order = ctx.order
    previous = order.status
    order.deliverTo = payload["deliverTo"]
    order.mobileNumber = payload["mobileNumber"]
    order.status = payload["status"]
    order.dishes = payload["dishes"]
    logger.info(f"Order {order.id} updated ({previous} -> {order.status})")
    return HandlerResult(data=order.to_dict())


def destroy_order(ctx: RequestContext) -> HandlerResult:
    get_order_store().remove(ctx.order.id)
    logger.info(f"Order {ctx.order.id} deleted")
    return HandlerResult(status_code=204)


# =============================================================================
# CHAINS
# =============================================================================

list_chain = Chain(handler=list_orders)

create_chain = Chain(
    *required_fields,
    validate_line_items,
    validate_status_value,
    handler=create_order,
)

read_chain = Chain(order_exists, handler=read_order)

update_chain = Chain(
    order_exists,
    order_id_matches_route,
    validate_status_transition,
    *required_fields,
    validate_line_items,
    handler=update_order,
)

destroy_chain = Chain(order_exists, require_pending, handler=destroy_order)
