"""
Route orchestration: coordinate routes and natural-language routes.

Natural-language legs are resolved one at a time, in order, and the first
failure aborts before any directions request is made.
"""

import logging
from collections.abc import Sequence

from ..exceptions import LegRole, ResolutionError
from .naver import NaverMapsClient
from .resolver import AddressResolver
from .types import Coordinate, OriginalAddresses, ResolvedAddress, RouteOption, RouteResult

logger = logging.getLogger(__name__)


class RouteOrchestrator:
    """Composes address resolution with Naver directions requests."""

    def __init__(self, client: NaverMapsClient, resolver: AddressResolver | None = None):
        self._client = client
        self._resolver = resolver or AddressResolver(client)

    async def directions(
        self,
        start: Coordinate,
        goal: Coordinate,
        waypoints: Sequence[Coordinate] = (),
        option: RouteOption = RouteOption.FASTEST,
        lang: str | None = None,
    ) -> RouteResult:
        """Route between coordinates, using the waypoint API only when needed."""
        if waypoints:
            return await self._client.route_with_waypoints(
                start, goal, list(waypoints), option=option, lang=lang
            )
        return await self._client.route(start, goal, option=option, lang=lang)

    async def directions_by_address(
        self,
        start_address: str,
        goal_address: str,
        waypoint_addresses: Sequence[str] = (),
        option: RouteOption = RouteOption.FASTEST,
        lang: str | None = None,
    ) -> RouteResult:
        """Resolve start, goal, and waypoints, then route between them.

        Args:
            start_address: Free-form start address or place name
            goal_address: Free-form destination address or place name
            waypoint_addresses: Intermediate stops, in visiting order
            option: Route option
            lang: Guidance language

        Returns:
            RouteResult with ``original_addresses`` filled in

        Raises:
            ResolutionError: For the first leg that cannot be resolved,
                attributed to its role and waypoint index
        """
        start = await self._resolve_leg(start_address, LegRole.START)
        goal = await self._resolve_leg(goal_address, LegRole.GOAL)
        waypoints: list[ResolvedAddress] = []
        for index, address in enumerate(waypoint_addresses):
            waypoints.append(await self._resolve_leg(address, LegRole.WAYPOINT, index))

        result = await self.directions(
            start.coordinate,
            goal.coordinate,
            [wp.coordinate for wp in waypoints],
            option=option,
            lang=lang,
        )
        result.original_addresses = OriginalAddresses(start=start, goal=goal, waypoints=waypoints)
        return result

    async def _resolve_leg(
        self, query: str, role: LegRole, index: int | None = None
    ) -> ResolvedAddress:
        try:
            return await self._resolver.resolve(query)
        except ResolutionError as e:
            error = e.for_leg(role, index)
            logger.error("Route aborted: %s", error)
            raise error from e
