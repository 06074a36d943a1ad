"""
Constants for naver-maps-mcp server.

All magic strings, API metadata, and configuration defaults live here.
"""


class ServerConfig:
    NAME = "naver-maps-mcp"
    VERSION = "1.0.0"
    DESCRIPTION = "Naver Maps geocoding & directions MCP Server"
    DEFAULT_HOST = "localhost"
    DEFAULT_PORT = 3000


class NaverApiConfig:
    BASE_URL = "https://maps.apigw.ntruss.com"
    GEOCODE_PATH = "/map-geocode/v2/geocode"
    REVERSE_GEOCODE_PATH = "/map-reversegeocode/v2/gc"
    DIRECTIONS_PATH = "/map-direction/v1/driving"
    DIRECTIONS_WAYPOINTS_PATH = "/map-direction-15/v1/driving"
    HEADER_CLIENT_ID = "x-ncp-apigw-api-key-id"
    HEADER_CLIENT_SECRET = "x-ncp-apigw-api-key"
    TIMEOUT_MS = 5000
    RETRIES = 1
    MAX_COUNT = 100
    MAX_WAYPOINTS = 15
    REVERSE_ORDERS = "addr,roadaddr"
    REVERSE_OUTPUT = "json"


class EnvVar:
    NAVER_CLIENT_ID = "NAVER_CLIENT_ID"
    NAVER_CLIENT_SECRET = "NAVER_CLIENT_SECRET"
    NAVER_API_BASE_URL = "NAVER_API_BASE_URL"
    PORT = "PORT"
    LOG_LEVEL = "LOG_LEVEL"
    DEBUG = "DEBUG"
    API_TIMEOUT = "API_TIMEOUT"
    API_RETRIES = "API_RETRIES"
    USE_DUMMY_DATA_WHEN_ERROR = "USE_DUMMY_DATA_WHEN_ERROR"


# Accepted enum values for tool arguments
COORDS_TYPES = ["latlng", "utmk", "tm128", "epsg", "naver", "bessel"]
COORD_SYSTEMS = ["EPSG:4326", "NAVER", "UTMK", "TM128", "BESSEL"]
DIRECTION_LANGUAGES = ["ko", "en", "ja", "zh"]
GEOCODE_LANGUAGES = ["kor", "eng"]

# Tool lists
GEOCODING_TOOLS = ["geocode", "reverseGeocode", "searchPlaces", "transformCoordinates"]
DIRECTIONS_TOOLS = [
    "getDirections",
    "getDirectionsWithWaypoints",
    "getDirectionsByNaturalLanguage",
    "getDirectionsWithWaypointsByNaturalLanguage",
]
ALL_TOOLS = GEOCODING_TOOLS + DIRECTIONS_TOOLS


class ErrorMessages:
    MISSING_CREDENTIALS = "Naver API credentials are not configured: {}"
    NO_RESULTS = "No results found for query '{}'"
    INVALID_LAT = "Invalid latitude {}: must be between -90 and 90"
    INVALID_LON = "Invalid longitude {}: must be between -180 and 180"
    INVALID_COORDINATE = "Invalid coordinate {!r}: expected an object with latitude and longitude"
    EMPTY_QUERY = "Query string cannot be empty"
    INVALID_ADDRESS = "Invalid entry in {}: {!r} is not a non-empty address string"
    INVALID_XY = "Invalid coords {!r}: expected an object with numeric x and y"
    INVALID_JSON = "Invalid JSON: {}"
    INVALID_OPTION = "Unknown route option '{}'. Expected one of: {}"
    INVALID_CHOICE = "Invalid {} '{}'. Expected one of: {}"
    INVALID_FILTER = "Invalid filter {!r}"
    TOO_MANY_WAYPOINTS = "At most {} waypoints are supported, got {}"
    REQUEST_MALFORMED = "Naver API rejected the request (HTTP {}): {}"
    UPSTREAM_INTERNAL = "Naver API internal error (HTTP {}): {}"
    NETWORK_ERROR = "Network error contacting Naver API: {}"
    INVALID_RESPONSE = "Naver API returned an unreadable response: {}"
    ROUTE_FAILED = "Directions request failed (code {}): {}"
    UNRESOLVED_LEG = "Could not resolve {} address '{}': {}"
    UNKNOWN_TOOL = "Unknown tool: {}"
    MISSING_ARGUMENTS = "Missing required argument(s) for {}: {}"
    INVALID_ARGUMENTS = "Invalid arguments for {}: {}"


class SuccessMessages:
    GEOCODE_FOUND = "Found {} result(s) for '{}'"
    GEOCODE_EMPTY = "No results found for '{}'"
    GEOCODE_SYNTHETIC = "Returned synthetic data for '{}' because the Naver API request failed"
    REVERSE_FOUND = "Reverse geocoded ({}, {}) to: {}"
    REVERSE_EMPTY = "No address found at ({}, {})"
    REVERSE_SYNTHETIC = "Returned synthetic data for ({}, {}) because the Naver API request failed"
    DIRECTIONS = "Route of {:.1f} km, about {:.0f} min"
    DIRECTIONS_WAYPOINTS = "Route via {} waypoint(s) of {:.1f} km, about {:.0f} min"
    PLACES_STUB = "Place search is not implemented; returning a placeholder result"
