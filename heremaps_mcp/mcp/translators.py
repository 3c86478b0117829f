"""Turn tool arguments into HERE Maps requests."""

from __future__ import annotations

import re
from typing import Any, Mapping

from ..core.exceptions import InvalidToolArguments
from ..core.here_client import OutboundRequest

GEOCODE_URL = "https://geocode.search.hereapi.com/v1/geocode"
REVERSE_GEOCODE_URL = "https://revgeocode.search.hereapi.com/v1/revgeocode"
ROUTES_URL = "https://router.hereapi.com/v8/routes"
DISCOVER_URL = "https://discover.search.hereapi.com/v1/discover"
INCIDENTS_URL = "https://data.traffic.hereapi.com/v7/incidents"
STATIC_MAP_URL = "https://maps.hereapi.com/mia/v3/base/mc"

ROUTE_RETURN_FIELDS = "summary,polyline,actions,instructions"
STATIC_MAP_SIZE = "480x370"
STATIC_MAP_FORMAT = "png8"

_WHITESPACE = re.compile(r"\s+")


def require(arguments: Mapping[str, Any], key: str) -> Any:
    """Fetch a required argument or raise InvalidToolArguments."""

    value = arguments.get(key) if isinstance(arguments, Mapping) else None
    if value is None:
        raise InvalidToolArguments(f"Missing required argument: {key}")
    return value


def format_number(value: Any) -> str:
    """Render a number as JSON prints it, so 14.0 becomes ``14``."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _position(arguments: Mapping[str, Any]) -> str:
    latitude = require(arguments, "latitude")
    longitude = require(arguments, "longitude")
    return f"{format_number(latitude)},{format_number(longitude)}"


def geocode_request(arguments: Mapping[str, Any], api_key: str) -> OutboundRequest:
    return OutboundRequest(
        GEOCODE_URL,
        {"q": str(require(arguments, "address")), "apiKey": api_key},
    )


def reverse_geocode_request(arguments: Mapping[str, Any], api_key: str) -> OutboundRequest:
    return OutboundRequest(
        REVERSE_GEOCODE_URL,
        {"at": _position(arguments), "apiKey": api_key},
    )


def directions_request(arguments: Mapping[str, Any], api_key: str) -> OutboundRequest:
    return OutboundRequest(
        ROUTES_URL,
        {
            "origin": str(require(arguments, "origin")),
            "destination": str(require(arguments, "destination")),
            "transportMode": str(require(arguments, "transportMode")),
            "return": ROUTE_RETURN_FIELDS,
            "apiKey": api_key,
        },
    )


def search_places_request(arguments: Mapping[str, Any], api_key: str) -> OutboundRequest:
    return OutboundRequest(
        DISCOVER_URL,
        {
            "at": _position(arguments),
            "q": str(require(arguments, "query")),
            "apiKey": api_key,
        },
    )


def traffic_incidents_request(arguments: Mapping[str, Any], api_key: str) -> OutboundRequest:
    center = require(arguments, "center")
    radius = format_number(require(arguments, "radius"))
    return OutboundRequest(
        INCIDENTS_URL,
        {
            "in": f"circle:{center};r={radius}",
            "locationReferencing": "none",
            "apiKey": api_key,
        },
    )


def display_request(arguments: Mapping[str, Any], api_key: str) -> OutboundRequest:
    """Build the static map image URL; nothing is fetched for this tool."""

    center = _WHITESPACE.sub("", str(require(arguments, "center")))
    zoom = format_number(require(arguments, "zoomLevel"))
    style = str(require(arguments, "style"))
    return OutboundRequest(
        f"{STATIC_MAP_URL}/center:{center};zoom={zoom}/{STATIC_MAP_SIZE}/{STATIC_MAP_FORMAT}",
        {"apikey": api_key, "style": style},
    )
