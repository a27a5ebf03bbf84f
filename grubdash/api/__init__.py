"""
API Routers

Thin FastAPI adapters: each endpoint builds a RequestContext from the
request body and path parameters and runs the matching service chain.
"""

from fastapi.responses import JSONResponse, Response

from grubdash.services.pipeline import Chain, RequestContext


def build_context(body=None, **params: str) -> RequestContext:
    return RequestContext(body=body, params=params)


def respond(chain: Chain, ctx: RequestContext) -> Response:
    """Run a chain and wrap its result as ``{"data": ...}``, or an empty 204."""
    result = chain.run(ctx)
    if result.data is None and result.status_code == 204:
        return Response(status_code=204)
    return JSONResponse(status_code=result.status_code, content={"data": result.data})


__all__ = ["build_context", "respond"]
