"""Naver Maps geocoding and directions exposed as MCP tools."""

from .constants import ServerConfig

__version__ = ServerConfig.VERSION
