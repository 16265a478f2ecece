"""MCP server for supply-list document discovery."""

from __future__ import annotations

import logging
import os

from mcp.server.fastmcp import FastMCP

from supply_list_mcp.admin.router import (
    api_config_get,
    api_config_update,
    api_stats,
    health_check,
)
from supply_list_mcp.tools.router import api_scrape_url, register_discovery_tools

logger = logging.getLogger(__name__)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Create MCP server with stateless mode enabled
# Stateless mode auto-creates sessions for unknown session IDs, making the server
# resilient to restarts
mcp = FastMCP(
    "Supply List MCP",
    instructions=(
        "Finds school supply-list documents (PDFs and Google Drive files) linked "
        "from a school web page or a Drive folder, labels each one with its grade "
        "and returns them in grade order, Prekinder through IV° Medio."
    ),
    stateless_http=True,
)

register_discovery_tools(mcp)

# Plain HTTP endpoints served next to the MCP transport
mcp.custom_route("/api/scrape-url", methods=["GET"])(api_scrape_url)
mcp.custom_route("/healthz", methods=["GET"])(health_check)
mcp.custom_route("/api/stats", methods=["GET"])(api_stats)
mcp.custom_route("/api/config", methods=["GET"])(api_config_get)
mcp.custom_route("/api/config", methods=["POST"])(api_config_update)


def run_server(transport: str = "streamable-http", host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the MCP server.

    Args:
        transport: Transport type ('streamable-http' or 'sse')
        host: Host to bind to (default: 0.0.0.0)
        port: Port to bind to (default: 8000)
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Configure host and port via settings
    mcp.settings.host = host
    mcp.settings.port = port

    logger.info(f"Starting Supply List MCP on {host}:{port} ({transport})")
    mcp.run(transport=transport)


if __name__ == "__main__":
    run_server()
