"""
Async HTTP client for the Naver Maps API (NCP API Gateway).

Handles credential headers, timeouts, failure classification, response
normalization, and the synthetic-data fallback for geocoding.
"""

import logging

import httpx

from ..config import Settings
from ..constants import ErrorMessages, NaverApiConfig
from ..exceptions import FailureKind, RoutingError, UpstreamError
from .fallback import synthetic_geocode_payload, synthetic_reverse_payload
from .types import (
    Coordinate,
    FallbackRecord,
    GeocodeCandidate,
    GeocodeFilter,
    GeocodeResult,
    GeocodeStatus,
    ReverseGeocodeItem,
    ReverseGeocodeResult,
    RouteGuide,
    RouteOption,
    RouteResult,
    RouteSection,
)

logger = logging.getLogger(__name__)

REGION_KEYS = ("area0", "area1", "area2", "area3", "area4")


class NaverMapsClient:
    """Async client for Naver geocoding, reverse geocoding, and directions.

    Holds no per-request state: credentials and timeout are taken from the
    current ``Settings`` on every call, so ``reload`` takes effect on the
    next request.
    """

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or Settings()
        self._client: httpx.AsyncClient | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    def reload(self, settings: Settings) -> None:
        """Swap in new configuration (e.g. rotated credentials)."""
        self._settings = settings
        logger.info(
            "Naver client configuration reloaded (credentials %s)",
            "set" if settings.has_credentials else "missing",
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazily create httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=self._settings.timeout_seconds,
            )
        return self._client

    def _auth_headers(self) -> dict[str, str]:
        settings = self._settings
        if not settings.has_credentials:
            logger.warning(
                "Naver API credentials missing (%s); request is expected to fail",
                ", ".join(settings.missing_credentials),
            )
        elif settings.debug:
            logger.debug(
                "Using client id %s*** / secret %s***",
                settings.client_id[:4],
                settings.client_secret[:4],
            )
        return {
            NaverApiConfig.HEADER_CLIENT_ID: settings.client_id or "",
            NaverApiConfig.HEADER_CLIENT_SECRET: settings.client_secret or "",
        }

    async def _request(self, path: str, params: dict) -> dict:
        """Make an authenticated GET request and return the decoded JSON body."""
        client = await self._get_client()
        url = f"{self._settings.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)

        try:
            response = await client.get(
                url,
                params=params,
                headers=self._auth_headers(),
                timeout=self._settings.timeout_seconds,
            )
        except httpx.TransportError as e:
            logger.error("No response from Naver API, check network connectivity: %s", e)
            raise UpstreamError(
                ErrorMessages.NETWORK_ERROR.format(str(e) or type(e).__name__),
                FailureKind.NETWORK_UNREACHABLE,
            ) from e

        status = response.status_code
        if status >= 500:
            detail = _error_detail(response)
            logger.error("Naver API internal error (HTTP %d): %s", status, detail)
            raise UpstreamError(
                ErrorMessages.UPSTREAM_INTERNAL.format(status, detail),
                FailureKind.UPSTREAM_INTERNAL,
                status_code=status,
            )
        if status >= 400:
            detail = _error_detail(response)
            logger.error("Naver API rejected request (HTTP %d), check parameters: %s", status, detail)
            raise UpstreamError(
                ErrorMessages.REQUEST_MALFORMED.format(status, detail),
                FailureKind.REQUEST_MALFORMED,
                status_code=status,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(
                ErrorMessages.INVALID_RESPONSE.format(e),
                FailureKind.UPSTREAM_INTERNAL,
                status_code=status,
            ) from e
        logger.debug("Response from %s: %s", path, data)
        return data if isinstance(data, dict) else {}

    def _fallback_enabled(self, use_fallback: bool | None) -> bool:
        if use_fallback is not None:
            return use_fallback
        return self._settings.use_dummy_data_when_error

    async def geocode(
        self,
        query: str,
        filter: GeocodeFilter | None = None,
        coordinate: Coordinate | None = None,
        language: str | None = None,
        page: int | None = None,
        count: int | None = None,
        use_fallback: bool | None = None,
    ) -> GeocodeResult:
        """Forward geocode: address text to candidate coordinates.

        Args:
            query: Free-form address or place name
            filter: Administrative-code filter
            coordinate: Search centre, biases results by distance
            language: Response language ("kor" or "eng")
            page: Result page number
            count: Results per page (clamped to 1-100)
            use_fallback: Return synthetic data on failure. None defers to
                ``Settings.use_dummy_data_when_error``.

        Returns:
            GeocodeResult with status ok, empty, or fallback

        Raises:
            ValueError: If query is empty
            UpstreamError: If the request fails and fallback is off
        """
        if not query or not query.strip():
            raise ValueError(ErrorMessages.EMPTY_QUERY)

        params: dict[str, str | int] = {"query": query}
        if coordinate is not None:
            params["coordinate"] = coordinate.to_param()
        if filter is not None:
            params["filter"] = filter.to_param()
        if language:
            params["language"] = language
        if page:
            params["page"] = page
        if count:
            params["count"] = min(max(1, count), NaverApiConfig.MAX_COUNT)

        logger.info("Geocoding %r", query)
        try:
            data = await self._request(NaverApiConfig.GEOCODE_PATH, params)
            result = _parse_payload(parse_geocode_response, query, data)
        except UpstreamError as e:
            if not self._fallback_enabled(use_fallback):
                raise
            logger.warning("Returning synthetic geocode data for %r: %s", query, e)
            return parse_geocode_response(
                query, synthetic_geocode_payload(), fallback=FallbackRecord(str(e))
            )

        if result.is_empty:
            logger.warning("No geocoding results for %r", query)
        return result

    async def reverse_geocode(
        self,
        latitude: float,
        longitude: float,
        coords_type: str | None = None,
        orders: str | None = None,
        use_fallback: bool | None = None,
    ) -> ReverseGeocodeResult:
        """Reverse geocode: coordinate to administrative and road addresses.

        Args:
            latitude: Latitude (-90 to 90)
            longitude: Longitude (-180 to 180)
            coords_type: Input coordinate system label
            orders: Comma-separated result kinds (default "addr,roadaddr")
            use_fallback: Return synthetic data on failure. None defers to
                ``Settings.use_dummy_data_when_error``.

        Raises:
            ValueError: If coordinates are out of range
            UpstreamError: If the request fails and fallback is off
        """
        coordinate = Coordinate(latitude=latitude, longitude=longitude)
        params: dict[str, str] = {
            "coords": coordinate.to_param(),
            "output": NaverApiConfig.REVERSE_OUTPUT,
            "orders": orders or NaverApiConfig.REVERSE_ORDERS,
        }
        if coords_type:
            params["coords_type"] = coords_type

        logger.info("Reverse geocoding (%s, %s)", latitude, longitude)
        try:
            data = await self._request(NaverApiConfig.REVERSE_GEOCODE_PATH, params)
            result = _parse_payload(parse_reverse_response, coordinate, data)
        except UpstreamError as e:
            if not self._fallback_enabled(use_fallback):
                raise
            logger.warning(
                "Returning synthetic reverse geocode data for (%s, %s): %s", latitude, longitude, e
            )
            return parse_reverse_response(
                coordinate, synthetic_reverse_payload(), fallback=FallbackRecord(str(e))
            )
        return result

    async def route(
        self,
        start: Coordinate,
        goal: Coordinate,
        option: RouteOption = RouteOption.FASTEST,
        lang: str | None = None,
    ) -> RouteResult:
        """Driving directions between two points. Failures always propagate."""
        params = {"start": start.to_param(), "goal": goal.to_param(), "option": option.value}
        if lang:
            params["lang"] = lang
        logger.info("Directions %s -> %s (%s)", params["start"], params["goal"], option.value)
        data = await self._request(NaverApiConfig.DIRECTIONS_PATH, params)
        return _parse_payload(parse_route_response, data, start, goal, option)

    async def route_with_waypoints(
        self,
        start: Coordinate,
        goal: Coordinate,
        waypoints: list[Coordinate],
        option: RouteOption = RouteOption.FASTEST,
        lang: str | None = None,
    ) -> RouteResult:
        """Driving directions through ordered waypoints. Failures always propagate.

        Raises:
            ValueError: If more than 15 waypoints are given
        """
        if len(waypoints) > NaverApiConfig.MAX_WAYPOINTS:
            raise ValueError(
                ErrorMessages.TOO_MANY_WAYPOINTS.format(NaverApiConfig.MAX_WAYPOINTS, len(waypoints))
            )
        params = {"start": start.to_param(), "goal": goal.to_param(), "option": option.value}
        if waypoints:
            params["waypoints"] = "|".join(wp.to_param() for wp in waypoints)
        if lang:
            params["lang"] = lang
        logger.info(
            "Directions %s -> %s via %d waypoint(s) (%s)",
            params["start"],
            params["goal"],
            len(waypoints),
            option.value,
        )
        data = await self._request(NaverApiConfig.DIRECTIONS_WAYPOINTS_PATH, params)
        return _parse_payload(parse_route_response, data, start, goal, option, waypoints)

    @staticmethod
    def transform_coordinates(coords: dict, from_coord_sys: str, to_coord_sys: str) -> dict:
        """Coordinate-system transform placeholder: returns the input unchanged."""
        try:
            x, y = float(coords["x"]), float(coords["y"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(ErrorMessages.INVALID_XY.format(coords)) from e
        return {
            "x": x,
            "y": y,
            "fromCoordSys": from_coord_sys,
            "toCoordSys": to_coord_sys,
        }

    async def aclose(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error message from a Naver error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if body.get("errorMessage"):
            return str(body["errorMessage"])
    return response.text[:200]


def _parse_payload(parser, *args):
    """Run a parser over a live payload; a malformed body is an upstream fault."""
    try:
        return parser(*args)
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
        logger.error("Malformed Naver API response: %r", e)
        raise UpstreamError(
            ErrorMessages.INVALID_RESPONSE.format(f"{type(e).__name__}: {e}"),
            FailureKind.UPSTREAM_INTERNAL,
        ) from e


def _to_float(value, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def parse_geocode_response(
    query: str, data: dict, fallback: FallbackRecord | None = None
) -> GeocodeResult:
    """Parse a geocode payload, converting ``x``/``y`` to floats.

    A missing or non-numeric ``distance`` becomes 0.
    """
    candidates = []
    for raw in data.get("addresses") or []:
        distance = raw.get("distance")
        candidates.append(
            GeocodeCandidate(
                road_address=raw.get("roadAddress") or "",
                jibun_address=raw.get("jibunAddress") or "",
                english_address=raw.get("englishAddress") or "",
                x=float(raw["x"]),
                y=float(raw["y"]),
                distance=float(distance) if isinstance(distance, (int, float)) else 0.0,
                address_elements=raw.get("addressElements") or [],
            )
        )

    if fallback is not None:
        status = GeocodeStatus.FALLBACK
    elif candidates:
        status = GeocodeStatus.OK
    else:
        status = GeocodeStatus.EMPTY
    meta = data.get("meta") or {}
    return GeocodeResult(
        query=query,
        status=status,
        candidates=candidates,
        total_count=int(meta.get("totalCount", len(candidates))),
        fallback=fallback,
    )


def _compose_address(name: str, region: dict[str, str], land: dict | None) -> str:
    """Join region names and land number into a display address."""
    parts = [region.get(key, "") for key in REGION_KEYS[1:]]
    if land and name == "roadaddr":
        parts = parts[:2] + [land.get("name", "")]
    if land and land.get("number1"):
        number = land["number1"]
        if land.get("number2"):
            number = f"{number}-{land['number2']}"
        parts.append(number)
    return " ".join(p for p in parts if p)


def parse_reverse_response(
    coordinate: Coordinate, data: dict, fallback: FallbackRecord | None = None
) -> ReverseGeocodeResult:
    """Parse a reverse geocode payload, converting region centres to floats."""
    items = []
    for raw in data.get("results") or []:
        region_raw = raw.get("region") or {}
        region: dict[str, str] = {}
        center = None
        for key in REGION_KEYS:
            area = region_raw.get(key)
            if not area:
                continue
            region[key] = area.get("name", "")
            centre_raw = (area.get("coords") or {}).get("center")
            if centre_raw:
                centre_raw["x"] = _to_float(centre_raw.get("x"))
                centre_raw["y"] = _to_float(centre_raw.get("y"))
                if area.get("name") and (centre_raw["x"] or centre_raw["y"]):
                    center = Coordinate(latitude=centre_raw["y"], longitude=centre_raw["x"])
        name = raw.get("name", "")
        land = raw.get("land")
        items.append(
            ReverseGeocodeItem(
                name=name,
                address=_compose_address(name, region, land),
                region=region,
                center=center,
                land=land,
                code=raw.get("code"),
            )
        )

    if fallback is not None:
        status = GeocodeStatus.FALLBACK
    elif items:
        status = GeocodeStatus.OK
    else:
        status = GeocodeStatus.EMPTY
    return ReverseGeocodeResult(coordinate=coordinate, status=status, items=items, fallback=fallback)


def parse_route_response(
    data: dict,
    start: Coordinate,
    goal: Coordinate,
    option: RouteOption,
    waypoints: list[Coordinate] | None = None,
) -> RouteResult:
    """Parse a directions payload into a RouteResult.

    Raises:
        RoutingError: If the API reports a non-zero result code
    """
    code = data.get("code", 0)
    if code != 0:
        raise RoutingError(code, data.get("message", ""))

    routes = data.get("route") or {}
    candidates = routes.get(option.value) or next(iter(routes.values()), None)
    if not candidates:
        raise RoutingError(-1, "response contained no route")
    trip = candidates[0]
    summary = trip.get("summary") or {}

    return RouteResult(
        option=option,
        start=start,
        goal=goal,
        distance=_to_float(summary.get("distance")),
        duration=_to_float(summary.get("duration")),
        path=[Coordinate.from_lnglat(p) for p in trip.get("path") or []],
        sections=[
            RouteSection(
                point_index=int(s.get("pointIndex", 0)),
                point_count=int(s.get("pointCount", 0)),
                distance=_to_float(s.get("distance")),
                name=s.get("name", ""),
                congestion=s.get("congestion"),
                speed=s.get("speed"),
            )
            for s in trip.get("section") or []
        ],
        guides=[
            RouteGuide(
                point_index=int(g.get("pointIndex", 0)),
                type=int(g.get("type", 0)),
                instructions=g.get("instructions", ""),
                distance=_to_float(g.get("distance")),
                duration=_to_float(g.get("duration")),
            )
            for g in trip.get("guide") or []
        ],
        waypoints=list(waypoints or []),
        toll_fare=summary.get("tollFare"),
        taxi_fare=summary.get("taxiFare"),
        fuel_price=summary.get("fuelPrice"),
        departure_time=summary.get("departureTime"),
    )
