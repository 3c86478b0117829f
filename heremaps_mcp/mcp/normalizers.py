"""Reshape HERE Maps responses into the public result of each tool."""

from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import MalformedResponseError
from ..core.polyline import iter_decode
from ..core.types import Coordinate, ToolFailure, ToolOutcome, ToolSuccess
from .translators import format_number

# Lookups keep only the best upstream match, in upstream order.
FIRST_MATCH = 0
MAX_TRAFFIC_INCIDENTS = 10
COORDINATE_DECIMALS = 5
UNKNOWN_CATEGORY = "Unknown"

PRETTY = 2


def _as_object(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise MalformedResponseError(
            f"Expected a JSON object from HERE Maps, got {type(payload).__name__}"
        )
    return payload


def _results(payload: Any, key: str) -> list[Any]:
    """Return the list under ``key``; an absent key counts as no results."""

    value = _as_object(payload).get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedResponseError(f"HERE Maps field '{key}' is not a list")
    return value


def _field(obj: Any, *path: str | int) -> Any:
    """Walk ``path`` through nested objects, failing with a readable error."""

    current = obj
    for key in path:
        try:
            current = current[key]
        except (KeyError, IndexError, TypeError):
            where = ".".join(str(part) for part in path)
            raise MalformedResponseError(f"HERE Maps response is missing '{where}'") from None
    return current


def normalize_geocode(payload: Any, arguments: Mapping[str, Any]) -> ToolOutcome:
    items = _results(payload, "items")
    if not items:
        return ToolFailure("Geocoding failed: No results found")

    match = _field(items, FIRST_MATCH)
    return ToolSuccess(
        {
            "location": _field(match, "position"),
            "address": _field(match, "address", "label"),
            "id": _field(match, "id"),
        },
        indent=PRETTY,
    )


def normalize_reverse_geocode(payload: Any, arguments: Mapping[str, Any]) -> ToolOutcome:
    items = _results(payload, "items")
    if not items:
        return ToolFailure("Reverse geocoding failed: No results found")

    match = _field(items, FIRST_MATCH)
    return ToolSuccess(
        {
            "address": _field(match, "address", "label"),
            "position": _field(match, "position"),
            "id": _field(match, "id"),
        },
        indent=PRETTY,
    )


def normalize_directions(payload: Any, arguments: Mapping[str, Any]) -> ToolOutcome:
    routes = _results(payload, "routes")
    if not routes:
        return ToolFailure("Routing failed: No routes found")

    section = _field(routes, 0, "sections", 0)
    encoded = _field(section, "polyline")
    if not isinstance(encoded, str):
        raise MalformedResponseError("HERE Maps route polyline is not a string")

    polyline = [
        Coordinate.from_point(point).to_pair(COORDINATE_DECIMALS)
        for point in iter_decode(encoded)
    ]
    return ToolSuccess(
        {
            "summary": _field(section, "summary"),
            "polyline": polyline,
            "actions": _field(section, "actions"),
        }
    )


def _category(item: Mapping[str, Any]) -> str:
    categories = item.get("categories") or []
    if categories and isinstance(categories[0], Mapping) and categories[0].get("name"):
        return categories[0]["name"]
    return UNKNOWN_CATEGORY


def normalize_search_places(payload: Any, arguments: Mapping[str, Any]) -> ToolOutcome:
    items = _results(payload, "items")
    if not items:
        return ToolFailure(f"No places found for query: {arguments.get('query')}")

    places = []
    for item in items:
        places.append(
            {
                "name": _field(item, "title"),
                "address": _field(item, "address", "label"),
                "position": _field(item, "position"),
                "category": _category(item),
            }
        )
    return ToolSuccess(places, indent=PRETTY)


def normalize_traffic_incidents(payload: Any, arguments: Mapping[str, Any]) -> ToolOutcome:
    results = _results(payload, "results")
    if not results:
        radius = format_number(arguments.get("radius"))
        center = arguments.get("center")
        return ToolFailure(
            f"No traffic incidents found in the radius of {radius} meters around {center}"
        )

    incidents = []
    for result in results[:MAX_TRAFFIC_INCIDENTS]:
        details = _field(result, "incidentDetails")
        incidents.append(
            {
                "description": _field(details, "description"),
                "startTime": _field(details, "startTime"),
                "endTime": _field(details, "endTime"),
                "type": _field(details, "type"),
                "criticality": _field(details, "criticality"),
            }
        )
    return ToolSuccess(incidents)


def normalize_display(image_url: str, arguments: Mapping[str, Any]) -> ToolOutcome:
    return ToolSuccess({"image_url": image_url})
