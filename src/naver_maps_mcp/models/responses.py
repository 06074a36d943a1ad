"""
Response models for naver-maps-mcp tools.

All tool responses are Pydantic models for type safety and a consistent
envelope: success payloads carry a ``message``; failures are ErrorResponse
with ``is_error`` set.
"""

from pydantic import BaseModel, ConfigDict, Field


def format_response(model: BaseModel, output_mode: str = "json") -> str:
    """Format a response model as JSON or human-readable text.

    Args:
        model: Pydantic response model instance
        output_mode: "json" (default) or "text"

    Returns:
        Formatted string
    """
    if output_mode == "text" and hasattr(model, "to_text"):
        return str(model.to_text())
    return str(model.model_dump_json(by_alias=True))


class ErrorResponse(BaseModel):
    """Error response model for tool failures."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Error message describing what went wrong")
    is_error: bool = Field(True, description="Always true for error responses")
    error_type: str | None = Field(None, description="Error category")
    tool: str | None = Field(None, description="Tool that produced the error")

    @classmethod
    def from_exception(cls, exc: Exception, tool: str | None = None) -> "ErrorResponse":
        """Build an error envelope, categorizing by exception type."""
        error_type = getattr(exc, "error_type", None)
        if error_type is None:
            error_type = "invalid_input" if isinstance(exc, ValueError) else "internal"
        return cls(error=str(exc) or type(exc).__name__, error_type=error_type, tool=tool)

    def to_text(self) -> str:
        return f"Error: {self.error}"


class CoordinateModel(BaseModel):
    """A latitude/longitude pair."""

    model_config = ConfigDict(extra="forbid")

    latitude: float = Field(..., description="Latitude", ge=-90, le=90)
    longitude: float = Field(..., description="Longitude", ge=-180, le=180)


class GeocodeAddress(BaseModel):
    """Single geocoding candidate."""

    model_config = ConfigDict(extra="forbid")

    road_address: str = Field(..., description="Road-name address")
    jibun_address: str = Field(..., description="Lot-number (jibun) address")
    english_address: str = Field("", description="English address")
    x: float = Field(..., description="Longitude")
    y: float = Field(..., description="Latitude")
    distance: float = Field(0.0, description="Distance from the search centre in metres")

    def to_text(self) -> str:
        parts = [self.road_address or self.jibun_address]
        if self.road_address and self.jibun_address:
            parts.append(f"  Jibun: {self.jibun_address}")
        parts.append(f"  Coordinates: {self.y:.7f}, {self.x:.7f}")
        return "\n".join(parts)


class GeocodeResponse(BaseModel):
    """Forward geocoding response."""

    model_config = ConfigDict(extra="forbid")

    query: str = Field(..., description="Original search query")
    status: str = Field(..., description="ok, empty, or fallback")
    addresses: list[GeocodeAddress] = Field(..., description="Geocoding candidates")
    count: int = Field(..., description="Number of candidates", ge=0)
    total_count: int = Field(0, description="Total matches reported by the API", ge=0)
    source: str = Field(..., description="authentic or synthetic")
    fallback_reason: str | None = Field(None, description="Error that triggered synthetic data")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        if self.fallback_reason:
            lines.append(f"(synthetic: {self.fallback_reason})")
        lines.append("")
        for i, a in enumerate(self.addresses, 1):
            lines.append(f"{i}. {a.to_text()}")
        return "\n".join(lines)


class ReverseGeocodeEntry(BaseModel):
    """One reverse geocoding result."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Result kind (addr, roadaddr, ...)")
    address: str = Field(..., description="Composed display address")
    region: dict[str, str] = Field(..., description="Region names area0..area4")
    center: CoordinateModel | None = Field(None, description="Centre of the most specific region")
    land: dict | None = Field(None, description="Land / road details")


class ReverseGeocodeResponse(BaseModel):
    """Reverse geocoding response."""

    model_config = ConfigDict(extra="forbid")

    latitude: float = Field(..., description="Query latitude")
    longitude: float = Field(..., description="Query longitude")
    status: str = Field(..., description="ok, empty, or fallback")
    results: list[ReverseGeocodeEntry] = Field(..., description="Reverse geocoding results")
    count: int = Field(..., description="Number of results", ge=0)
    source: str = Field(..., description="authentic or synthetic")
    fallback_reason: str | None = Field(None, description="Error that triggered synthetic data")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        for r in self.results:
            lines.append(f"  {r.name}: {r.address}")
        return "\n".join(lines)


class PlaceItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    address: str
    location: CoordinateModel


class PlacesResponse(BaseModel):
    """Placeholder place search response."""

    model_config = ConfigDict(extra="forbid")

    query: str = Field(..., description="Search keyword")
    places: list[PlaceItem] = Field(..., description="Places found")
    count: int = Field(..., description="Number of places", ge=0)
    implemented: bool = Field(False, description="False: result is a fixed placeholder")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        for p in self.places:
            lines.append(f"  {p.name} - {p.address}")
        return "\n".join(lines)


class TransformResponse(BaseModel):
    """Coordinate transform response (identity placeholder)."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    x: float = Field(..., description="X (longitude or easting)")
    y: float = Field(..., description="Y (latitude or northing)")
    from_coord_sys: str = Field(..., alias="fromCoordSys", description="Source coordinate system")
    to_coord_sys: str = Field(..., alias="toCoordSys", description="Target coordinate system")

    def to_text(self) -> str:
        return f"({self.x}, {self.y}) {self.from_coord_sys} -> {self.to_coord_sys}"


class RouteSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    point_index: int
    point_count: int
    distance: float
    name: str
    congestion: int | None = None
    speed: float | None = None


class RouteGuideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    point_index: int
    type: int
    instructions: str
    distance: float
    duration: float


class ResolvedAddressModel(BaseModel):
    """How one natural-language leg was resolved."""

    model_config = ConfigDict(extra="forbid")

    query: str = Field(..., description="Address as given")
    resolved: str = Field(..., description="Address the query resolved to")
    coordinates: CoordinateModel = Field(..., description="Resolved coordinate")
    source: str = Field(..., description="authentic or synthetic")


class OriginalAddressesModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start: ResolvedAddressModel
    goal: ResolvedAddressModel
    waypoints: list[ResolvedAddressModel] = Field(default_factory=list)


class DirectionsResponse(BaseModel):
    """Driving directions response."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    option: str = Field(..., description="Route option used")
    start: CoordinateModel = Field(..., description="Start coordinate")
    goal: CoordinateModel = Field(..., description="Goal coordinate")
    waypoints: list[CoordinateModel] = Field(default_factory=list, description="Waypoints in order")
    distance: float = Field(..., description="Total distance in metres")
    duration: float = Field(..., description="Total duration in milliseconds")
    toll_fare: float | None = Field(None, description="Toll fare (KRW)")
    taxi_fare: float | None = Field(None, description="Estimated taxi fare (KRW)")
    fuel_price: float | None = Field(None, description="Estimated fuel cost (KRW)")
    departure_time: str | None = Field(None, description="Departure time used by the API")
    path: list[CoordinateModel] = Field(..., description="Route geometry in order")
    sections: list[RouteSectionModel] = Field(default_factory=list, description="Road sections")
    guides: list[RouteGuideModel] = Field(default_factory=list, description="Turn instructions")
    original_addresses: OriginalAddressesModel | None = Field(
        None, alias="originalAddresses", description="How each address argument was resolved"
    )
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        if self.original_addresses:
            oa = self.original_addresses
            lines.append(f"From: {oa.start.query} -> {oa.start.resolved}")
            for i, wp in enumerate(oa.waypoints, 1):
                lines.append(f"Via {i}: {wp.query} -> {wp.resolved}")
            lines.append(f"To: {oa.goal.query} -> {oa.goal.resolved}")
        for g in self.guides:
            lines.append(f"  - {g.instructions} ({g.distance:.0f}m)")
        return "\n".join(lines)
