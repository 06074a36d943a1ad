"""
Synthetic Naver API payloads, used in place of a failed geocoding call.

The payloads mirror the upstream response shape (including string-typed
``x``/``y``) so they go through the same parsing as live responses.
"""

import copy

_GEOCODE_PAYLOAD = {
    "status": "OK",
    "meta": {"totalCount": 1, "page": 1, "count": 1},
    "addresses": [
        {
            "roadAddress": "서울특별시 강남구 테헤란로 129",
            "jibunAddress": "서울특별시 강남구 역삼동 823",
            "englishAddress": "129, Teheran-ro, Gangnam-gu, Seoul, Republic of Korea",
            "x": "127.0269218",
            "y": "37.5014274",
            "distance": 0,
        }
    ],
}


def _area(name: str, x: float, y: float, alias: str | None = None) -> dict:
    area = {"name": name, "coords": {"center": {"crs": "", "x": x, "y": y}}}
    if alias:
        area["alias"] = alias
    return area


_REVERSE_PAYLOAD = {
    "status": {"code": 0, "name": "ok", "message": "done"},
    "results": [
        {
            "name": "roadaddr",
            "code": {"id": "1168010100", "type": "L", "mappingId": "09680101"},
            "region": {
                "area0": _area("kr", 126.98, 37.5633),
                "area1": _area("서울특별시", 126.978, 37.5665, alias="서울"),
                "area2": _area("강남구", 127.0482, 37.514),
                "area3": _area("역삼동", 127.0359, 37.5017),
                "area4": _area("", 0, 0),
            },
            "land": {
                "type": "",
                "number1": "129",
                "number2": "",
                "name": "테헤란로",
                "addition0": {"type": "building", "value": "강남N타워"},
                "addition1": {"type": "zipcode", "value": "06134"},
            },
        }
    ],
}


def synthetic_geocode_payload() -> dict:
    """Fresh copy of the stand-in geocode response."""
    return copy.deepcopy(_GEOCODE_PAYLOAD)


def synthetic_reverse_payload() -> dict:
    """Fresh copy of the stand-in reverse geocode response."""
    return copy.deepcopy(_REVERSE_PAYLOAD)
