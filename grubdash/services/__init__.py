"""
                        Services Module

Request handling for each resource, expressed as validation chains
followed by a terminal handler.

Services:
    - pipeline: request context and chain runner
    - validation: steps shared by every resource
    - dishes: dish chains and handlers
    - orders: order chains, handlers and status rules
"""

from grubdash.services.pipeline import Chain, HandlerResult, RequestContext, normalize_body

__all__ = ["Chain", "HandlerResult", "RequestContext", "normalize_body"]
