"""
Shared Validation Steps

Step factories used by both the dish and order chains. Each factory
returns a callable taking a RequestContext that returns None on success
and raises a ResourceError on failure.
"""

import math
from typing import Any, Callable, Optional

from grubdash.core.exceptions import NotFoundError, ValidationError
from grubdash.services.pipeline import RequestContext, Step
from grubdash.store import CollectionStore


def is_present(value: Any, zero_ok: bool = False) -> bool:
    """
    A value counts as supplied unless it is None, False, the empty string
    or zero. Numeric fields pass ``zero_ok`` so 0 reaches their own range check.
    """
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and value == 0:
        return zero_ok
    return True


def is_positive_number(value: Any) -> bool:
    """True for a finite int or float of at least 1. Booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 1
    if isinstance(value, float):
        return math.isfinite(value) and value >= 1
    return False


def body_has(resource: str, field_name: str, zero_ok: bool = False) -> Step:
    """Require ``field_name`` to be present in the normalized payload."""

    def check(ctx: RequestContext) -> None:
        if not is_present(ctx.payload.get(field_name), zero_ok):
            raise ValidationError(f"{resource} must include a {field_name}")

    check.__name__ = f"body_has_{field_name}"
    return check


def entity_exists(
    store_getter: Callable[[], CollectionStore],
    param: str,
    attr: str,
    not_found: str,
) -> Step:
    """
    Resolve the path parameter ``param`` against a store.

    On success the entity is published on the context as ``attr``.

    Args:
        store_getter: Factory returning the store to search
        param: Name of the path parameter holding the id
        attr: RequestContext attribute receiving the entity
        not_found: Message prefix, followed by the id
    """

    def check(ctx: RequestContext) -> None:
        entity_id = ctx.params.get(param, "")
        found = store_getter().find(entity_id)
        if found is None:
            raise NotFoundError(f"{not_found}: {entity_id}")
        setattr(ctx, attr, found)

    check.__name__ = f"{attr}_exists"
    return check


def id_matches_route(resource: str, attr: str, param: str) -> Step:
    """
    A payload id, when supplied, must equal the resolved entity's id.

    Ids are compared in string form so a numeric id in the body matches
    the same id in the path.
    """

    def check(ctx: RequestContext) -> None:
        payload_id: Optional[Any] = ctx.payload.get("id")
        if not is_present(payload_id):
            return
        entity = getattr(ctx, attr)
        if str(payload_id) == entity.id:
            return
        raise ValidationError(
            f"{resource} id does not match route id. "
            f"{resource}: {payload_id}, Route: {ctx.params.get(param, entity.id)}"
        )

    check.__name__ = f"{attr}_id_matches_route"
    return check
