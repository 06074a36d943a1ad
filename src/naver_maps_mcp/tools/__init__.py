"""MCP tool registrations for naver-maps-mcp."""

from .directions import register_directions_tools
from .dispatcher import ToolDispatcher
from .geocoding import register_geocoding_tools

__all__ = ["ToolDispatcher", "register_directions_tools", "register_geocoding_tools"]
