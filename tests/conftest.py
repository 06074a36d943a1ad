"""Shared test fixtures for naver-maps-mcp."""

import copy

import pytest
from unittest.mock import AsyncMock, MagicMock

from naver_maps_mcp.config import Settings

BASE_URL = "https://maps.apigw.ntruss.com"
GEOCODE_URL = f"{BASE_URL}/map-geocode/v2/geocode"
REVERSE_URL = f"{BASE_URL}/map-reversegeocode/v2/gc"
DIRECTIONS_URL = f"{BASE_URL}/map-direction/v1/driving"
DIRECTIONS15_URL = f"{BASE_URL}/map-direction-15/v1/driving"

# Sample Naver API responses
SAMPLE_GEOCODE_RESPONSE = {
    "status": "OK",
    "meta": {"totalCount": 1, "page": 1, "count": 1},
    "addresses": [
        {
            "roadAddress": "경기도 성남시 분당구 불정로 6 NAVER그린팩토리",
            "jibunAddress": "경기도 성남시 분당구 정자동 178-1 NAVER그린팩토리",
            "englishAddress": "6, Buljeong-ro, Bundang-gu, Seongnam-si, Gyeonggi-do",
            "addressElements": [],
            "x": "127.1054328",
            "y": "37.3595963",
            "distance": 20.0,
        }
    ],
    "errorMessage": "",
}

SAMPLE_GEOCODE_NO_DISTANCE = {
    "status": "OK",
    "meta": {"totalCount": 2, "page": 1, "count": 2},
    "addresses": [
        {
            "roadAddress": "",
            "jibunAddress": "서울특별시 종로구 세종로 1-68",
            "x": "126.9769",
            "y": "37.5759",
        },
        {
            "roadAddress": "서울특별시 종로구 사직로 161",
            "jibunAddress": "서울특별시 종로구 세종로 1-1",
            "x": "126.9770",
            "y": "37.5788",
            "distance": "n/a",
        },
    ],
}

SAMPLE_GEOCODE_EMPTY = {
    "status": "OK",
    "meta": {"totalCount": 0, "page": 1, "count": 0},
    "addresses": [],
    "errorMessage": "",
}

SAMPLE_REVERSE_RESPONSE = {
    "status": {"code": 0, "name": "ok", "message": "done"},
    "results": [
        {
            "name": "addr",
            "code": {"id": "1168010100", "type": "L", "mappingId": "09680101"},
            "region": {
                "area0": {"name": "kr", "coords": {"center": {"crs": "", "x": "0.0", "y": "0.0"}}},
                "area1": {
                    "name": "서울특별시",
                    "coords": {"center": {"crs": "EPSG:4326", "x": "126.9783882", "y": "37.5666103"}},
                    "alias": "서울",
                },
                "area2": {
                    "name": "강남구",
                    "coords": {"center": {"crs": "EPSG:4326", "x": "127.0473667", "y": "37.5173050"}},
                },
                "area3": {
                    "name": "역삼동",
                    "coords": {"center": {"crs": "EPSG:4326", "x": "127.0363806", "y": "37.5006050"}},
                },
                "area4": {"name": "", "coords": {"center": {"crs": "", "x": "0.0", "y": "0.0"}}},
            },
            "land": {"type": "1", "number1": "823", "number2": "", "name": ""},
        },
        {
            "name": "roadaddr",
            "code": {"id": "1168010100", "type": "L", "mappingId": "09680101"},
            "region": {
                "area0": {"name": "kr", "coords": {"center": {"crs": "", "x": "0.0", "y": "0.0"}}},
                "area1": {
                    "name": "서울특별시",
                    "coords": {"center": {"crs": "EPSG:4326", "x": "126.9783882", "y": "37.5666103"}},
                },
                "area2": {
                    "name": "강남구",
                    "coords": {"center": {"crs": "EPSG:4326", "x": "127.0473667", "y": "37.5173050"}},
                },
                "area3": {
                    "name": "역삼동",
                    "coords": {"center": {"crs": "EPSG:4326", "x": "127.0363806", "y": "37.5006050"}},
                },
                "area4": {"name": "", "coords": {"center": {"crs": "", "x": "0.0", "y": "0.0"}}},
            },
            "land": {
                "type": "",
                "number1": "129",
                "number2": "",
                "name": "테헤란로",
                "addition0": {"type": "building", "value": "강남N타워"},
            },
        },
    ],
}

SAMPLE_DIRECTIONS_RESPONSE = {
    "code": 0,
    "message": "길찾기를 성공하였습니다.",
    "currentDateTime": "2025-03-26T11:00:00",
    "route": {
        "trafast": [
            {
                "summary": {
                    "start": {"location": [127.1054328, 37.3595963]},
                    "goal": {"location": [127.0269218, 37.5014274], "dir": 0},
                    "distance": 21780,
                    "duration": 1620000,
                    "departureTime": "2025-03-26T11:00:00",
                    "bbox": [[127.02, 37.35], [127.11, 37.51]],
                    "tollFare": 1200,
                    "taxiFare": 24800,
                    "fuelPrice": 2950,
                },
                "path": [
                    [127.1054328, 37.3595963],
                    [127.0800000, 37.4200000],
                    [127.0269218, 37.5014274],
                ],
                "section": [
                    {
                        "pointIndex": 0,
                        "pointCount": 3,
                        "distance": 21780,
                        "name": "분당수서로",
                        "congestion": 1,
                        "speed": 55,
                    }
                ],
                "guide": [
                    {
                        "pointIndex": 1,
                        "type": 3,
                        "instructions": "분당수서로 방면으로 우회전",
                        "distance": 9000,
                        "duration": 600000,
                    }
                ],
            }
        ]
    },
}

SAMPLE_DIRECTIONS_NO_ROUTE = {
    "code": 1,
    "message": "출발지와 도착지가 동일합니다. 확인 후 다시 지정해주세요.",
    "currentDateTime": "2025-03-26T11:00:00",
}


def payload(data):
    """Deep copy of a sample payload, so tests can't leak mutations."""
    return copy.deepcopy(data)


@pytest.fixture
def settings():
    return Settings(client_id="test-client-id", client_secret="test-client-secret")


@pytest.fixture
def fallback_settings():
    return Settings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        use_dummy_data_when_error=True,
    )


@pytest.fixture
def mock_naver_client():
    """Mock NaverMapsClient returning parsed canned responses."""
    from naver_maps_mcp.core.naver import (
        NaverMapsClient,
        parse_geocode_response,
        parse_reverse_response,
        parse_route_response,
    )
    from naver_maps_mcp.core.types import Coordinate

    async def geocode(query, **kwargs):
        if not query or not query.strip():
            raise ValueError("Query string cannot be empty")
        return parse_geocode_response(query, payload(SAMPLE_GEOCODE_RESPONSE))

    async def reverse_geocode(latitude, longitude, **kwargs):
        coordinate = Coordinate(latitude=latitude, longitude=longitude)
        return parse_reverse_response(coordinate, payload(SAMPLE_REVERSE_RESPONSE))

    async def route(start, goal, option=None, lang=None):
        from naver_maps_mcp.core.types import RouteOption

        return parse_route_response(
            payload(SAMPLE_DIRECTIONS_RESPONSE), start, goal, option or RouteOption.FASTEST
        )

    async def route_with_waypoints(start, goal, waypoints, option=None, lang=None):
        from naver_maps_mcp.core.types import RouteOption

        return parse_route_response(
            payload(SAMPLE_DIRECTIONS_RESPONSE),
            start,
            goal,
            option or RouteOption.FASTEST,
            waypoints,
        )

    client = AsyncMock(spec=NaverMapsClient)
    client.geocode = AsyncMock(side_effect=geocode)
    client.reverse_geocode = AsyncMock(side_effect=reverse_geocode)
    client.route = AsyncMock(side_effect=route)
    client.route_with_waypoints = AsyncMock(side_effect=route_with_waypoints)
    client.transform_coordinates = MagicMock(side_effect=NaverMapsClient.transform_coordinates)
    return client


@pytest.fixture
def orchestrator(mock_naver_client):
    """RouteOrchestrator over the mocked client."""
    from naver_maps_mcp.core.router import RouteOrchestrator

    return RouteOrchestrator(mock_naver_client)


@pytest.fixture
def dispatcher(mock_naver_client, orchestrator):
    """ToolDispatcher with every tool registered against mocks."""
    from naver_maps_mcp.tools.directions import register_directions_tools
    from naver_maps_mcp.tools.dispatcher import ToolDispatcher
    from naver_maps_mcp.tools.geocoding import register_geocoding_tools

    table = ToolDispatcher()
    register_geocoding_tools(table, mock_naver_client)
    register_directions_tools(table, orchestrator)
    return table


@pytest.fixture
def mock_mcp():
    """Mock ChukMCPServer."""
    mcp = MagicMock()
    mcp.tool = MagicMock(return_value=lambda fn: fn)
    return mcp
