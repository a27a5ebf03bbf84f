"""
Dish Service

Validation chains and terminal handlers for the dish collection.
Dishes can be listed, created, read and updated; there is no delete.

Chains:
    list:   handler only
    create: presence x4, price, create
    read:   existence, read
    update: existence, id match, presence x4, price, update

Version: 1.0.0
"""

import logging

from grubdash.core.exceptions import ValidationError
from grubdash.models import Dish
from grubdash.services.pipeline import Chain, HandlerResult, RequestContext
from grubdash.services.validation import (
    body_has,
    entity_exists,
    id_matches_route,
    is_positive_number,
)
from grubdash.store import get_dish_store
from grubdash.utils import next_id

logger = logging.getLogger(__name__)

RESOURCE = "Dish"
FIELDS = ("name", "description", "image_url", "price")


# =============================================================================
# VALIDATIONS
# =============================================================================

def validate_dish_price(ctx: RequestContext) -> None:
    """Price must be a number of at least 1."""
    if not is_positive_number(ctx.payload.get("price")):
        raise ValidationError(f"{RESOURCE} must have a price that is an integer greater than 0")


dish_exists = entity_exists(get_dish_store, "dish_id", "dish", "Dish does not exist")
dish_id_matches_route = id_matches_route(RESOURCE, "dish", "dish_id")
required_fields = [body_has(RESOURCE, name, zero_ok=(name == "price")) for name in FIELDS]


# =============================================================================
# HANDLERS
# =============================================================================

def list_dishes(ctx: RequestContext) -> HandlerResult:
    return HandlerResult(data=[dish.to_dict() for dish in get_dish_store().list()])


def create_dish(ctx: RequestContext) -> HandlerResult:
    payload = ctx.payload
    dish = Dish(
        id=next_id(),
        name=payload["name"],
        description=payload["description"],
        image_url=payload["image_url"],
        price=payload["price"],
    )
    get_dish_store().insert(dish)
    logger.info(f"Dish {dish.id} created: {dish.name}")
    return HandlerResult(status_code=201, data=dish.to_dict())


def read_dish(ctx: RequestContext) -> HandlerResult:
    return HandlerResult(data=ctx.dish.to_dict())


def update_dish(ctx: RequestContext) -> HandlerResult:
    """Overwrite every field except id on the resolved dish."""
    payload = ctx.payload
    dish = ctx.dish
    dish.name = payload["name"]
    dish.description = payload["description"]
    dish.image_url = payload["image_url"]
    dish.price = payload["price"]
    logger.info(f"Dish {dish.id} updated")
    return HandlerResult(data=dish.to_dict())


# =============================================================================
# CHAINS
# =============================================================================

list_chain = Chain(handler=list_dishes)

create_chain = Chain(
    *required_fields,
    validate_dish_price,
    handler=create_dish,
)

read_chain = Chain(dish_exists, handler=read_dish)

update_chain = Chain(
    dish_exists,
    dish_id_matches_route,
    *required_fields,
    validate_dish_price,
    handler=update_dish,
)
