"""Tests for naver-maps-mcp constants."""

from naver_maps_mcp.constants import (
    ALL_TOOLS,
    COORD_SYSTEMS,
    DIRECTION_LANGUAGES,
    DIRECTIONS_TOOLS,
    GEOCODING_TOOLS,
    EnvVar,
    ErrorMessages,
    NaverApiConfig,
    ServerConfig,
    SuccessMessages,
)


class TestServerConfig:
    def test_name(self):
        assert ServerConfig.NAME == "naver-maps-mcp"

    def test_version(self):
        assert ServerConfig.VERSION == "1.0.0"

    def test_default_port(self):
        assert ServerConfig.DEFAULT_PORT == 3000


class TestNaverApiConfig:
    def test_base_url(self):
        assert NaverApiConfig.BASE_URL == "https://maps.apigw.ntruss.com"

    def test_paths(self):
        assert NaverApiConfig.GEOCODE_PATH == "/map-geocode/v2/geocode"
        assert NaverApiConfig.REVERSE_GEOCODE_PATH == "/map-reversegeocode/v2/gc"
        assert NaverApiConfig.DIRECTIONS_PATH == "/map-direction/v1/driving"
        assert NaverApiConfig.DIRECTIONS_WAYPOINTS_PATH == "/map-direction-15/v1/driving"

    def test_headers(self):
        assert NaverApiConfig.HEADER_CLIENT_ID == "x-ncp-apigw-api-key-id"
        assert NaverApiConfig.HEADER_CLIENT_SECRET == "x-ncp-apigw-api-key"

    def test_timeout(self):
        assert NaverApiConfig.TIMEOUT_MS == 5000

    def test_max_waypoints(self):
        assert NaverApiConfig.MAX_WAYPOINTS == 15


class TestToolLists:
    def test_all_tools_count(self):
        assert len(ALL_TOOLS) == 8

    def test_no_duplicates(self):
        assert len(set(ALL_TOOLS)) == len(ALL_TOOLS)

    def test_groups_cover_all(self):
        assert set(GEOCODING_TOOLS) | set(DIRECTIONS_TOOLS) == set(ALL_TOOLS)


class TestChoices:
    def test_coord_systems(self):
        assert "EPSG:4326" in COORD_SYSTEMS

    def test_direction_languages(self):
        assert DIRECTION_LANGUAGES[0] == "ko"


class TestEnvVar:
    def test_credentials(self):
        assert EnvVar.NAVER_CLIENT_ID == "NAVER_CLIENT_ID"
        assert EnvVar.NAVER_CLIENT_SECRET == "NAVER_CLIENT_SECRET"

    def test_fallback_toggle(self):
        assert EnvVar.USE_DUMMY_DATA_WHEN_ERROR == "USE_DUMMY_DATA_WHEN_ERROR"


class TestMessages:
    def test_unknown_tool_format(self):
        assert ErrorMessages.UNKNOWN_TOOL.format("x") == "Unknown tool: x"

    def test_unresolved_leg_format(self):
        msg = ErrorMessages.UNRESOLVED_LEG.format("goal", "nowhere", "no results")
        assert "goal" in msg
        assert "nowhere" in msg

    def test_directions_format(self):
        assert SuccessMessages.DIRECTIONS.format(21.78, 27.0) == "Route of 21.8 km, about 27 min"
