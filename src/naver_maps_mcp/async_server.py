#!/usr/bin/env python3
"""
Async Naver Maps MCP Server using chuk-mcp-server

Geocoding, reverse geocoding, and driving directions (including routes
between natural-language addresses) via the Naver Maps API.
"""

import logging

from chuk_mcp_server import ChukMCPServer

from .config import Settings
from .constants import ServerConfig
from .core.naver import NaverMapsClient
from .core.router import RouteOrchestrator
from .tools.directions import register_directions_tools
from .tools.dispatcher import ToolDispatcher
from .tools.geocoding import register_geocoding_tools

logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer(ServerConfig.NAME)

# Naver client starts from the current environment; the CLI reloads it
# after applying command-line overrides.
client = NaverMapsClient(Settings.from_env())
orchestrator = RouteOrchestrator(client)

# One dispatch table shared by every transport
dispatcher = ToolDispatcher()
register_geocoding_tools(dispatcher, client)
register_directions_tools(dispatcher, orchestrator)
dispatcher.bind(mcp)

# Run the server
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting Naver Maps MCP Server...")
    mcp.run(stdio=True)
