"""
Dish endpoints.

Mounted at /dishes. Dishes cannot be deleted.
"""

from typing import Any

from fastapi import APIRouter, Body, status
from fastapi.responses import Response

from grubdash.api import build_context, respond
from grubdash.schemas import ERROR_RESPONSES, DishListResponse, DishResponse
from grubdash.services import dishes

router = APIRouter()

DISH_EXAMPLE = {
    "data": {
        "name": "Pasta",
        "description": "Fresh spaghetti with basil",
        "image_url": "https://example.com/pasta.jpg",
        "price": 12,
    }
}


@router.get("", response_model=DishListResponse, summary="List Dishes")
async def list_dishes() -> Response:
    """Return every dish."""
    return respond(dishes.list_chain, build_context())


@router.post(
    "",
    response_model=DishResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Create Dish",
)
async def create_dish(
    body: Any = Body(None, examples=[DISH_EXAMPLE]),
) -> Response:
    """
    Create a dish from ``{"data": {...}}``.

    name, description and image_url must be non-empty and price must be
    a number of at least 1. The id is always generated.
    """
    return respond(dishes.create_chain, build_context(body))


@router.get("/{dish_id}", response_model=DishResponse, responses=ERROR_RESPONSES, summary="Get Dish")
async def read_dish(dish_id: str) -> Response:
    return respond(dishes.read_chain, build_context(dish_id=dish_id))


@router.put("/{dish_id}", response_model=DishResponse, responses=ERROR_RESPONSES, summary="Update Dish")
async def update_dish(
    dish_id: str,
    body: Any = Body(None, examples=[DISH_EXAMPLE]),
) -> Response:
    """
    Replace every field of a dish except its id.

    An id in the body is optional but must match the route id.
    """
    return respond(dishes.update_chain, build_context(body, dish_id=dish_id))
