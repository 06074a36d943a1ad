"""
Request-scoped value types shared by the Naver client, resolver, and router.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from ..constants import ErrorMessages


class ResultSource(str, Enum):
    """Whether a result came from the live API or was fabricated locally."""

    AUTHENTIC = "authentic"
    SYNTHETIC = "synthetic"


class GeocodeStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    FALLBACK = "fallback"


class RouteOption(str, Enum):
    """Naver directions route options."""

    FASTEST = "trafast"
    COMFORT = "tracomfort"
    OPTIMAL = "traoptimal"
    AVOID_TOLL = "traavoidtoll"
    AVOID_CAR_ONLY = "traavoidcaronly"

    @classmethod
    def parse(cls, value: "str | RouteOption | None") -> "RouteOption":
        """Accept an API value (``trafast``), a friendly alias (``avoid-toll``), or None."""
        if value is None or value == "":
            return cls.FASTEST
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for option in cls:
            if text == option.value or text.replace("-", "_") == option.name.lower():
                return option
        raise ValueError(
            ErrorMessages.INVALID_OPTION.format(value, ", ".join(o.value for o in cls))
        )


@dataclass(frozen=True)
class Coordinate:
    """WGS84 point. Naver's wire format is ``"longitude,latitude"``."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (-90 <= self.latitude <= 90):
            raise ValueError(ErrorMessages.INVALID_LAT.format(self.latitude))
        if not (-180 <= self.longitude <= 180):
            raise ValueError(ErrorMessages.INVALID_LON.format(self.longitude))

    @classmethod
    def from_value(cls, value: "Coordinate | Mapping | str") -> "Coordinate":
        """Build from a mapping with latitude/longitude, or a JSON string of one."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError(ErrorMessages.INVALID_JSON.format(e)) from e
        if not isinstance(value, Mapping):
            raise ValueError(ErrorMessages.INVALID_COORDINATE.format(value))
        try:
            return cls(latitude=float(value["latitude"]), longitude=float(value["longitude"]))
        except (KeyError, TypeError) as e:
            raise ValueError(ErrorMessages.INVALID_COORDINATE.format(value)) from e

    @classmethod
    def from_lnglat(cls, pair) -> "Coordinate":
        """Build from a ``[longitude, latitude]`` pair as used in route paths."""
        return cls(latitude=float(pair[1]), longitude=float(pair[0]))

    def to_param(self) -> str:
        return f"{self.longitude},{self.latitude}"

    def as_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


class FilterKind(str, Enum):
    HCODE = "HCODE"
    BCODE = "BCODE"
    RAW = "RAW"


@dataclass(frozen=True)
class GeocodeFilter:
    """Administrative-code filter for geocoding.

    ``HCODE``/``BCODE`` filters render as ``"HCODE@code1;code2"``; ``RAW``
    passes free text through unchanged.
    """

    kind: FilterKind
    codes: tuple[str, ...]

    @classmethod
    def parse(cls, value: "GeocodeFilter | Mapping | str | None") -> "GeocodeFilter | None":
        """Normalize a filter given as text or as ``{"type": ..., "codes": [...]}``."""
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            kind = str(value.get("type", "")).upper()
            codes = value.get("codes")
            if kind not in (FilterKind.HCODE.value, FilterKind.BCODE.value) or not codes:
                raise ValueError(ErrorMessages.INVALID_FILTER.format(dict(value)))
            if isinstance(codes, str):
                codes = codes.split(";")
            return cls(FilterKind(kind), tuple(str(c).strip() for c in codes if str(c).strip()))
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            prefix, sep, rest = text.partition("@")
            if sep and prefix.upper() in (FilterKind.HCODE.value, FilterKind.BCODE.value):
                codes = tuple(c.strip() for c in rest.split(";") if c.strip())
                if not codes:
                    raise ValueError(ErrorMessages.INVALID_FILTER.format(value))
                return cls(FilterKind(prefix.upper()), codes)
            return cls(FilterKind.RAW, (text,))
        raise ValueError(ErrorMessages.INVALID_FILTER.format(value))

    def to_param(self) -> str:
        if self.kind is FilterKind.RAW:
            return self.codes[0]
        return f"{self.kind.value}@{';'.join(self.codes)}"


@dataclass(frozen=True)
class FallbackRecord:
    """Marks a result as synthetic and keeps the error that triggered it."""

    error_message: str


@dataclass
class GeocodeCandidate:
    """One address returned by forward geocoding."""

    road_address: str
    jibun_address: str
    english_address: str
    x: float
    y: float
    distance: float = 0.0
    address_elements: list[dict] = field(default_factory=list)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.y, longitude=self.x)

    @property
    def display_address(self) -> str:
        """Road address when present, else the lot-number (jibun) address."""
        return self.road_address or self.jibun_address


@dataclass
class GeocodeResult:
    """Forward geocoding result; candidates keep upstream order."""

    query: str
    status: GeocodeStatus
    candidates: list[GeocodeCandidate]
    total_count: int = 0
    fallback: FallbackRecord | None = None

    @property
    def source(self) -> ResultSource:
        return ResultSource.SYNTHETIC if self.fallback else ResultSource.AUTHENTIC

    @property
    def is_empty(self) -> bool:
        return not self.candidates


@dataclass
class ReverseGeocodeItem:
    """One result of reverse geocoding (``addr`` or ``roadaddr``)."""

    name: str
    address: str
    region: dict[str, str]
    center: Coordinate | None = None
    land: dict | None = None
    code: dict | None = None


@dataclass
class ReverseGeocodeResult:
    """Reverse geocoding result for a single coordinate."""

    coordinate: Coordinate
    status: GeocodeStatus
    items: list[ReverseGeocodeItem]
    fallback: FallbackRecord | None = None

    @property
    def source(self) -> ResultSource:
        return ResultSource.SYNTHETIC if self.fallback else ResultSource.AUTHENTIC

    @property
    def display_address(self) -> str:
        return self.items[0].address if self.items else ""


@dataclass
class RouteSection:
    """Road segment metadata along a route path."""

    point_index: int
    point_count: int
    distance: float
    name: str
    congestion: int | None = None
    speed: float | None = None


@dataclass
class RouteGuide:
    """Turn-by-turn instruction at a path point."""

    point_index: int
    type: int
    instructions: str
    distance: float
    duration: float


@dataclass
class ResolvedAddress:
    """Traceability record of one natural-language route leg."""

    query: str
    resolved: str
    coordinate: Coordinate
    source: ResultSource = ResultSource.AUTHENTIC


@dataclass
class OriginalAddresses:
    start: ResolvedAddress
    goal: ResolvedAddress
    waypoints: list[ResolvedAddress] = field(default_factory=list)


@dataclass
class RouteResult:
    """Driving route between start and goal, optionally via waypoints."""

    option: RouteOption
    start: Coordinate
    goal: Coordinate
    distance: float
    duration: float
    path: list[Coordinate]
    sections: list[RouteSection] = field(default_factory=list)
    guides: list[RouteGuide] = field(default_factory=list)
    waypoints: list[Coordinate] = field(default_factory=list)
    toll_fare: float | None = None
    taxi_fare: float | None = None
    fuel_price: float | None = None
    departure_time: str | None = None
    original_addresses: OriginalAddresses | None = None
