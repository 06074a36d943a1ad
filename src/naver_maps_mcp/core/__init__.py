"""Core Naver Maps client, address resolution, and route orchestration."""

from .naver import NaverMapsClient
from .resolver import AddressResolver
from .router import RouteOrchestrator

__all__ = ["AddressResolver", "NaverMapsClient", "RouteOrchestrator"]
