"""
Geocoding tool registration for naver-maps-mcp.

Registers geocode, reverseGeocode, and the searchPlaces / transformCoordinates
placeholders.
"""

import logging

from ...constants import (
    COORD_SYSTEMS,
    COORDS_TYPES,
    GEOCODE_LANGUAGES,
    SuccessMessages,
)
from ...core.types import GeocodeFilter, GeocodeStatus
from ...models.responses import (
    CoordinateModel,
    ErrorResponse,
    GeocodeAddress,
    GeocodeResponse,
    PlaceItem,
    PlacesResponse,
    ReverseGeocodeEntry,
    ReverseGeocodeResponse,
    TransformResponse,
    format_response,
)
from ..arguments import parse_choice, parse_json_object

logger = logging.getLogger(__name__)

PLACEHOLDER_PLACE = PlaceItem(
    name="Sample search result",
    address="서울특별시 강남구",
    location=CoordinateModel(latitude=37.5, longitude=127.0),
)


def register_geocoding_tools(mcp, client):
    """Register geocoding tools with the MCP server (or a ToolDispatcher)."""

    @mcp.tool(name="geocode")
    async def geocode(
        address: str,
        filter: str | None = None,
        language: str | None = None,
        page: int | None = None,
        count: int | None = None,
        output_mode: str = "json",
    ) -> str:
        """Convert an address or place name into coordinates (latitude, longitude).

        Args:
            address: Address to search for (e.g. "서울특별시 강남구 테헤란로 129")
            filter: Region filter, e.g. "HCODE@1168000000" or "BCODE@1168010100;1168010500"
            language: Response language, "kor" (default) or "eng"
            page: Result page number
            count: Results per page (1-100)
            output_mode: "json" (default) or "text"

        Returns:
            Candidate addresses with numeric x (longitude) and y (latitude).
            ``source`` is "synthetic" when stand-in data was returned
            because the Naver API call failed.
        """
        try:
            result = await client.geocode(
                address,
                filter=GeocodeFilter.parse(filter),
                language=parse_choice(language, "language", GEOCODE_LANGUAGES),
                page=page,
                count=count,
            )
            addresses = [
                GeocodeAddress(
                    road_address=c.road_address,
                    jibun_address=c.jibun_address,
                    english_address=c.english_address,
                    x=c.x,
                    y=c.y,
                    distance=c.distance,
                )
                for c in result.candidates
            ]
            if result.status is GeocodeStatus.FALLBACK:
                message = SuccessMessages.GEOCODE_SYNTHETIC.format(address)
            elif result.status is GeocodeStatus.EMPTY:
                message = SuccessMessages.GEOCODE_EMPTY.format(address)
            else:
                message = SuccessMessages.GEOCODE_FOUND.format(len(addresses), address)
            response = GeocodeResponse(
                query=address,
                status=result.status.value,
                addresses=addresses,
                count=len(addresses),
                total_count=result.total_count,
                source=result.source.value,
                fallback_reason=result.fallback.error_message if result.fallback else None,
                message=message,
            )
            return format_response(response, output_mode)
        except Exception as e:
            logger.error("geocode failed: %s", e)
            return format_response(ErrorResponse.from_exception(e, tool="geocode"), output_mode)

    @mcp.tool(name="reverseGeocode")
    async def reverse_geocode(
        latitude: float,
        longitude: float,
        coords_type: str | None = None,
        output_mode: str = "json",
    ) -> str:
        """Convert coordinates (latitude, longitude) into an address.

        Args:
            latitude: Latitude (-90 to 90)
            longitude: Longitude (-180 to 180)
            coords_type: Coordinate system of the input, one of
                latlng (default), utmk, tm128, epsg, naver, bessel
            output_mode: "json" (default) or "text"

        Returns:
            Administrative (addr) and road-name (roadaddr) addresses
        """
        try:
            result = await client.reverse_geocode(
                latitude,
                longitude,
                coords_type=parse_choice(coords_type, "coords_type", COORDS_TYPES),
            )
            entries = [
                ReverseGeocodeEntry(
                    name=item.name,
                    address=item.address,
                    region=item.region,
                    center=CoordinateModel(**item.center.as_dict()) if item.center else None,
                    land=item.land,
                )
                for item in result.items
            ]
            if result.status is GeocodeStatus.FALLBACK:
                message = SuccessMessages.REVERSE_SYNTHETIC.format(latitude, longitude)
            elif result.status is GeocodeStatus.EMPTY:
                message = SuccessMessages.REVERSE_EMPTY.format(latitude, longitude)
            else:
                message = SuccessMessages.REVERSE_FOUND.format(
                    latitude, longitude, result.display_address
                )
            response = ReverseGeocodeResponse(
                latitude=latitude,
                longitude=longitude,
                status=result.status.value,
                results=entries,
                count=len(entries),
                source=result.source.value,
                fallback_reason=result.fallback.error_message if result.fallback else None,
                message=message,
            )
            return format_response(response, output_mode)
        except Exception as e:
            logger.error("reverseGeocode failed: %s", e)
            return format_response(
                ErrorResponse.from_exception(e, tool="reverseGeocode"), output_mode
            )

    @mcp.tool(name="searchPlaces")
    async def search_places(
        query: str,
        coordinate: dict | None = None,
        radius: float | None = None,
        output_mode: str = "json",
    ) -> str:
        """Search places by keyword.

        Not backed by the Naver API yet: always returns a single fixed
        placeholder result with ``implemented`` set to false.

        Args:
            query: Search keyword
            coordinate: Search centre {"latitude": ..., "longitude": ...}
            radius: Search radius in metres
            output_mode: "json" (default) or "text"
        """
        try:
            response = PlacesResponse(
                query=query,
                places=[PLACEHOLDER_PLACE],
                count=1,
                implemented=False,
                message=SuccessMessages.PLACES_STUB,
            )
            return format_response(response, output_mode)
        except Exception as e:
            logger.error("searchPlaces failed: %s", e)
            return format_response(
                ErrorResponse.from_exception(e, tool="searchPlaces"), output_mode
            )

    @mcp.tool(name="transformCoordinates")
    async def transform_coordinates(
        coords: dict,
        fromCoordSys: str,
        toCoordSys: str,
        output_mode: str = "json",
    ) -> str:
        """Transform coordinates between coordinate systems.

        Not implemented yet: returns the coordinates unchanged together with
        the requested system labels.

        Args:
            coords: {"x": ..., "y": ...}
            fromCoordSys: EPSG:4326, NAVER, UTMK, TM128, or BESSEL
            toCoordSys: EPSG:4326, NAVER, UTMK, TM128, or BESSEL
            output_mode: "json" (default) or "text"
        """
        try:
            parse_choice(fromCoordSys, "fromCoordSys", COORD_SYSTEMS)
            parse_choice(toCoordSys, "toCoordSys", COORD_SYSTEMS)
            result = client.transform_coordinates(
                parse_json_object(coords, "coords"), fromCoordSys, toCoordSys
            )
            return format_response(TransformResponse(**result), output_mode)
        except Exception as e:
            logger.error("transformCoordinates failed: %s", e)
            return format_response(
                ErrorResponse.from_exception(e, tool="transformCoordinates"), output_mode
            )
