"""
Exceptions for naver-maps-mcp.

Input validation raises ``ValueError``; everything specific to talking to
Naver or resolving route legs derives from ``NaverMapsError``.
"""

from enum import Enum

from .constants import ErrorMessages


class FailureKind(str, Enum):
    """Diagnostic classification of an upstream failure."""

    REQUEST_MALFORMED = "request_malformed"
    UPSTREAM_INTERNAL = "upstream_internal"
    NETWORK_UNREACHABLE = "network_unreachable"


class LegRole(str, Enum):
    """Which part of a route an address was given for."""

    START = "start"
    GOAL = "goal"
    WAYPOINT = "waypoint"


class NaverMapsError(Exception):
    """Base class for naver-maps-mcp errors."""

    error_type = "error"


class ConfigurationError(NaverMapsError):
    """Required configuration (credentials) is missing."""

    error_type = "configuration"


class UpstreamError(NaverMapsError):
    """
    A request to the Naver API failed.

    Attributes:
        kind: Malformed request, upstream internal error, or network failure
        status_code: HTTP status, or None when no response was received
    """

    error_type = "upstream"

    def __init__(self, message: str, kind: FailureKind, status_code: int | None = None):
        self.kind = kind
        self.status_code = status_code
        super().__init__(message)


class RoutingError(NaverMapsError):
    """The directions API answered but could not produce a route."""

    error_type = "routing"

    def __init__(self, code: int, message: str):
        self.code = code
        super().__init__(ErrorMessages.ROUTE_FAILED.format(code, message))


class ResolutionError(NaverMapsError):
    """
    A free-form address could not be resolved to a coordinate.

    Attributes:
        query: The address string that failed
        reason: Why it failed
        role: Route leg the address belongs to, when known
        index: Position among the waypoints (0-based) for waypoint legs
    """

    error_type = "resolution"

    def __init__(
        self,
        query: str,
        reason: str,
        role: LegRole | None = None,
        index: int | None = None,
    ):
        self.query = query
        self.reason = reason
        self.role = role
        self.index = index
        super().__init__(ErrorMessages.UNRESOLVED_LEG.format(self.leg, query, reason))

    @property
    def leg(self) -> str:
        """Human-readable leg label, e.g. ``start`` or ``waypoint 2``."""
        if self.role is None:
            return "the"
        if self.role is LegRole.WAYPOINT and self.index is not None:
            return f"waypoint {self.index + 1}"
        return self.role.value

    def for_leg(self, role: LegRole, index: int | None = None) -> "ResolutionError":
        """Copy of this error attributed to a route leg."""
        return ResolutionError(self.query, self.reason, role=role, index=index)


class UnknownToolError(NaverMapsError):
    """A tool name that is not in the dispatch table."""

    error_type = "unknown_tool"

    def __init__(self, name: str):
        self.name = name
        super().__init__(ErrorMessages.UNKNOWN_TOOL.format(name))
