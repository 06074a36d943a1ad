"""
Normalization of loosely typed tool arguments.

MCP clients may send objects and arrays either as JSON values or as JSON
strings; these helpers accept both.
"""

import json

from ..constants import ErrorMessages
from ..core.types import Coordinate


def parse_json_list(value, name: str) -> list:
    """Return ``value`` as a list, decoding a JSON array string if needed."""
    if value is None:
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(ErrorMessages.INVALID_JSON.format(e)) from e
    if not isinstance(value, (list, tuple)):
        raise ValueError(ErrorMessages.INVALID_JSON.format(f"Expected a JSON array for {name}"))
    return list(value)


def parse_json_object(value, name: str) -> dict:
    """Return ``value`` as a dict, decoding a JSON object string if needed."""
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(ErrorMessages.INVALID_JSON.format(e)) from e
    if not isinstance(value, dict):
        raise ValueError(ErrorMessages.INVALID_JSON.format(f"Expected a JSON object for {name}"))
    return value


def parse_coordinates(value, name: str) -> list[Coordinate]:
    return [Coordinate.from_value(item) for item in parse_json_list(value, name)]


def parse_addresses(value, name: str) -> list[str]:
    """Return address strings; null, non-string, or blank items are rejected."""
    addresses = parse_json_list(value, name)
    for item in addresses:
        if not isinstance(item, str) or not item.strip():
            raise ValueError(ErrorMessages.INVALID_ADDRESS.format(name, item))
    return addresses


def parse_choice(value: str | None, name: str, choices: list[str]) -> str | None:
    """Validate an optional enum-like string argument."""
    if value is None or value == "":
        return None
    if value not in choices:
        raise ValueError(ErrorMessages.INVALID_CHOICE.format(name, value, ", ".join(choices)))
    return value
