"""Admin API routes for health, stats and config."""

from starlette.requests import Request
from starlette.responses import JSONResponse

from supply_list_mcp.admin.service import (
    get_current_config,
    get_stats,
    update_config,
)


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse({"status": "error", "message": message}, status_code=400)


async def health_check(request: Request) -> JSONResponse:
    """Liveness endpoint; does not touch any upstream site."""
    return JSONResponse({"status": "healthy"})


async def api_stats(request: Request) -> JSONResponse:
    """Discovery counters and recent requests as JSON."""
    return JSONResponse(get_stats())


async def api_config_get(request: Request) -> JSONResponse:
    return JSONResponse(get_current_config())


async def api_config_update(request: Request) -> JSONResponse:
    """Apply runtime config overrides from a ``{"config": {...}}`` body.

    Returns:
        JSONResponse with the update result, or 400 when the body is not
        a JSON object whose ``config`` member is an object
    """
    try:
        body = await request.json()
    except ValueError as e:
        return _bad_request(f"Body is not valid JSON: {e}")

    if not isinstance(body, dict):
        return _bad_request("Body must be a JSON object")
    config_updates = body.get("config", {})
    if not isinstance(config_updates, dict):
        return _bad_request("'config' must be a JSON object")

    return JSONResponse(update_config(config_updates))
