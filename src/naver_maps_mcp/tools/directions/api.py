"""
Directions tool registration for naver-maps-mcp.

Registers coordinate-based and natural-language routing tools.
"""

import logging

from ...constants import DIRECTION_LANGUAGES, SuccessMessages
from ...core.types import Coordinate, ResolvedAddress, RouteOption, RouteResult
from ...models.responses import (
    CoordinateModel,
    DirectionsResponse,
    ErrorResponse,
    OriginalAddressesModel,
    ResolvedAddressModel,
    RouteGuideModel,
    RouteSectionModel,
    format_response,
)
from ..arguments import parse_addresses, parse_choice, parse_coordinates

logger = logging.getLogger(__name__)


def _coordinate(c: Coordinate) -> CoordinateModel:
    return CoordinateModel(latitude=c.latitude, longitude=c.longitude)


def _resolved(address: ResolvedAddress) -> ResolvedAddressModel:
    return ResolvedAddressModel(
        query=address.query,
        resolved=address.resolved,
        coordinates=_coordinate(address.coordinate),
        source=address.source.value,
    )


def build_directions_response(result: RouteResult) -> DirectionsResponse:
    """Convert a RouteResult into the tool response model."""
    original = None
    if result.original_addresses is not None:
        oa = result.original_addresses
        original = OriginalAddressesModel(
            start=_resolved(oa.start),
            goal=_resolved(oa.goal),
            waypoints=[_resolved(wp) for wp in oa.waypoints],
        )
    km = result.distance / 1000
    minutes = result.duration / 60000
    if result.waypoints:
        message = SuccessMessages.DIRECTIONS_WAYPOINTS.format(len(result.waypoints), km, minutes)
    else:
        message = SuccessMessages.DIRECTIONS.format(km, minutes)
    return DirectionsResponse(
        option=result.option.value,
        start=_coordinate(result.start),
        goal=_coordinate(result.goal),
        waypoints=[_coordinate(wp) for wp in result.waypoints],
        distance=result.distance,
        duration=result.duration,
        toll_fare=result.toll_fare,
        taxi_fare=result.taxi_fare,
        fuel_price=result.fuel_price,
        departure_time=result.departure_time,
        path=[_coordinate(p) for p in result.path],
        sections=[
            RouteSectionModel(
                point_index=s.point_index,
                point_count=s.point_count,
                distance=s.distance,
                name=s.name,
                congestion=s.congestion,
                speed=s.speed,
            )
            for s in result.sections
        ],
        guides=[
            RouteGuideModel(
                point_index=g.point_index,
                type=g.type,
                instructions=g.instructions,
                distance=g.distance,
                duration=g.duration,
            )
            for g in result.guides
        ],
        original_addresses=original,
        message=message,
    )


def register_directions_tools(mcp, orchestrator):
    """Register directions tools with the MCP server (or a ToolDispatcher)."""

    @mcp.tool(name="getDirections")
    async def get_directions(
        start: dict,
        goal: dict,
        option: str | None = None,
        lang: str | None = None,
        output_mode: str = "json",
    ) -> str:
        """Get the driving route between a start and a goal coordinate.

        Args:
            start: Start coordinate {"latitude": ..., "longitude": ...}
            goal: Goal coordinate {"latitude": ..., "longitude": ...}
            option: trafast (default), tracomfort, traoptimal, traavoidtoll, traavoidcaronly
            lang: Guidance language: ko (default), en, ja, zh
            output_mode: "json" (default) or "text"

        Returns:
            Distance, duration, fares, path, sections, and turn guidance
        """
        try:
            result = await orchestrator.directions(
                Coordinate.from_value(start),
                Coordinate.from_value(goal),
                option=RouteOption.parse(option),
                lang=parse_choice(lang, "lang", DIRECTION_LANGUAGES),
            )
            return format_response(build_directions_response(result), output_mode)
        except Exception as e:
            logger.error("getDirections failed: %s", e)
            return format_response(ErrorResponse.from_exception(e, tool="getDirections"), output_mode)

    @mcp.tool(name="getDirectionsWithWaypoints")
    async def get_directions_with_waypoints(
        start: dict,
        goal: dict,
        waypoints: list[dict] | None = None,
        option: str | None = None,
        output_mode: str = "json",
    ) -> str:
        """Get the driving route from start to goal through ordered waypoints.

        Args:
            start: Start coordinate {"latitude": ..., "longitude": ...}
            goal: Goal coordinate {"latitude": ..., "longitude": ...}
            waypoints: Up to 15 coordinates, visited in the given order
            option: trafast (default), tracomfort, traoptimal, traavoidtoll, traavoidcaronly
            output_mode: "json" (default) or "text"
        """
        try:
            result = await orchestrator.directions(
                Coordinate.from_value(start),
                Coordinate.from_value(goal),
                parse_coordinates(waypoints, "waypoints"),
                option=RouteOption.parse(option),
            )
            return format_response(build_directions_response(result), output_mode)
        except Exception as e:
            logger.error("getDirectionsWithWaypoints failed: %s", e)
            return format_response(
                ErrorResponse.from_exception(e, tool="getDirectionsWithWaypoints"), output_mode
            )

    @mcp.tool(name="getDirectionsByNaturalLanguage")
    async def get_directions_by_natural_language(
        startAddress: str,
        goalAddress: str,
        option: str | None = None,
        lang: str | None = None,
        output_mode: str = "json",
    ) -> str:
        """Get a driving route between two addresses or place names.

        Each address is geocoded first (the top match is used); the response
        includes ``originalAddresses`` showing what each address resolved to.

        Args:
            startAddress: Start address or place name
            goalAddress: Destination address or place name
            option: trafast (default), tracomfort, traoptimal, traavoidtoll, traavoidcaronly
            lang: Guidance language: ko (default), en, ja, zh
            output_mode: "json" (default) or "text"
        """
        try:
            result = await orchestrator.directions_by_address(
                startAddress,
                goalAddress,
                option=RouteOption.parse(option),
                lang=parse_choice(lang, "lang", DIRECTION_LANGUAGES),
            )
            return format_response(build_directions_response(result), output_mode)
        except Exception as e:
            logger.error("getDirectionsByNaturalLanguage failed: %s", e)
            return format_response(
                ErrorResponse.from_exception(e, tool="getDirectionsByNaturalLanguage"), output_mode
            )

    @mcp.tool(name="getDirectionsWithWaypointsByNaturalLanguage")
    async def get_directions_with_waypoints_by_natural_language(
        startAddress: str,
        goalAddress: str,
        waypointAddresses: list[str] | None = None,
        option: str | None = None,
        output_mode: str = "json",
    ) -> str:
        """Get a driving route between addresses through ordered waypoint addresses.

        Addresses are geocoded one by one in order; if any cannot be
        resolved the call fails naming that address and no route is
        requested.

        Args:
            startAddress: Start address or place name
            goalAddress: Destination address or place name
            waypointAddresses: Intermediate addresses, visited in order
            option: trafast (default), tracomfort, traoptimal, traavoidtoll, traavoidcaronly
            output_mode: "json" (default) or "text"
        """
        try:
            result = await orchestrator.directions_by_address(
                startAddress,
                goalAddress,
                parse_addresses(waypointAddresses, "waypointAddresses"),
                option=RouteOption.parse(option),
            )
            return format_response(build_directions_response(result), output_mode)
        except Exception as e:
            logger.error("getDirectionsWithWaypointsByNaturalLanguage failed: %s", e)
            return format_response(
                ErrorResponse.from_exception(e, tool="getDirectionsWithWaypointsByNaturalLanguage"),
                output_mode,
            )
