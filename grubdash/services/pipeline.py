"""
Request Pipeline

A request is handled by a Chain: an ordered list of validation steps
followed by a terminal handler. Steps read and enrich a per-request
RequestContext and raise a ResourceError to stop the chain; the handler
runs only when every step passed.

Usage:
    create = Chain(
        body_has("Dish", "name"),
        validate_dish_price,
        handler=create_dish,
    )
    result = create.run(RequestContext(body=body))

Version: 1.0.0
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from grubdash.core.exceptions import ResourceError
from grubdash.models import Dish, Order

logger = logging.getLogger(__name__)


def normalize_body(body: Any) -> dict[str, Any]:
    """
    Extract the ``data`` object from a request body.

    Anything that is not ``{"data": {...}}`` yields an empty mapping.
    """
    if not isinstance(body, Mapping):
        return {}
    data = body.get("data")
    if not isinstance(data, Mapping):
        return {}
    return dict(data)


@dataclass
class RequestContext:
    """
    Per-request state shared by the steps of a chain.

    Attributes:
        body: Parsed JSON body as received (may be None)
        params: Path parameters
        dish: Set by the dish existence check
        order: Set by the order existence check
    """
    body: Any = None
    params: dict[str, str] = field(default_factory=dict)
    dish: Optional[Dish] = None
    order: Optional[Order] = None
    _payload: Optional[dict[str, Any]] = field(default=None, init=False, repr=False)

    @property
    def payload(self) -> dict[str, Any]:
        """The normalized ``data`` object, computed once per request."""
        if self._payload is None:
            self._payload = normalize_body(self.body)
        return self._payload


@dataclass
class HandlerResult:
    """Status code and ``data`` of a successful response. ``data`` is None for 204."""
    status_code: int = 200
    data: Any = None


Step = Callable[[RequestContext], None]
Handler = Callable[[RequestContext], HandlerResult]


class Chain:
    """Validation steps run in order before a terminal handler."""

    def __init__(self, *steps: Step, handler: Handler) -> None:
        self.steps = steps
        self.handler = handler

    def run(self, ctx: RequestContext) -> HandlerResult:
        """
        Run every step, then the handler.

        Raises:
            ResourceError: The first error raised by a step. Nothing after
                it runs, so a rejected update never mutates the entity.
        """
        for step in self.steps:
            try:
                step(ctx)
            except ResourceError as e:
                logger.info(
                    f"{self.handler.__name__} rejected by "
                    f"{getattr(step, '__name__', step)}: {e.status_code} {e.message}"
                )
                raise
        return self.handler(ctx)
