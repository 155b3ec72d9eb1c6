from __future__ import annotations

import logging

from fastmcp import FastMCP

from ...api import get_api_functions
from ...config import get_settings
from ...logging import configure_logging

INSTRUCTIONS = (
    "Lens Tracker records when a pair of two-week contact lenses was started and keeps a single "
    "calendar reminder on the replacement day. Use get_state to read it and save_start_date to update it."
)

logger = logging.getLogger(__name__)

server = FastMCP(name="lens-tracker", instructions=INSTRUCTIONS)

# Dynamically register all API functions as MCP tools.
for api_function in get_api_functions():
    logger.debug("Registering MCP tool: %s", api_function.name)
    server.tool(
        api_function.func,
        name=api_function.name,
        description=api_function.description,
        tags=set(api_function.tags),
    )


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    import asyncio

    configure_logging(get_settings())
    asyncio.run(server.run_streamable_http_async(host=host, port=port))
