"""Static catalog of the map tools advertised to MCP clients."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

TRANSPORT_MODES: tuple[str, ...] = (
    "car",
    "pedestrian",
    "bicycle",
    "truck",
    "scooter",
    "bus",
    "taxi",
)

MAP_STYLES: tuple[str, ...] = (
    "explore.day",
    "explore.night",
    "explore.satellite.day",
    "lite.day",
    "lite.night",
    "lite.satellite.day",
    "logistics.day",
    "logistics.night",
    "logistics.satellite.day",
    "satellite.day",
    "topo.day",
    "topo.night",
)

_MAP_STYLE_DESCRIPTION = (
    "style of the map, default is 'explore.day'. 'day' is the light scheme, while "
    "'night' is the dark scheme. The 'lite' variant educes emphasis on intricate road details "
    "making it easier to overlay additional information or custom layers onto the map. The "
    "'logistics' variant is optimized for logistics and transportation applications. The 'topo' "
    "variant is optimized for topographic maps, which are useful for displaying elevation data "
    "and other topographic features. The 'satellite.day' is a style displying satellite imagery "
    "without labels"
)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Name, description and JSON schema of one advertised tool.

    The schema is stored read-only; ``to_mcp_tool`` hands out plain copies.
    """

    name: str
    description: str
    parameter_schema: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameter_schema", _freeze(self.parameter_schema))

    def to_mcp_tool(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": _thaw(self.parameter_schema),
        }


def _object_schema(properties: dict[str, dict[str, Any]]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties),
    }


GEOCODE_TOOL = ToolDefinition(
    name="maps_geocode",
    description="Convert an address into geographic coordinates",
    parameter_schema=_object_schema(
        {
            "address": {"type": "string", "description": "The address to geocode"},
        }
    ),
)

REVERSE_GEOCODE_TOOL = ToolDefinition(
    name="maps_reverse_geocode",
    description="Convert coordinates into an address",
    parameter_schema=_object_schema(
        {
            "latitude": {"type": "number", "description": "Latitude coordinate"},
            "longitude": {"type": "number", "description": "Longitude coordinate"},
        }
    ),
)

ROUTING_TOOL = ToolDefinition(
    name="maps_directions",
    description="Get directions between two points using HERE Maps Routing API",
    parameter_schema=_object_schema(
        {
            "origin": {
                "type": "string",
                "description": "Starting point coordinates in 'latitude,longitude' format",
            },
            "destination": {
                "type": "string",
                "description": "Ending point coordinates in 'latitude,longitude' format",
            },
            "transportMode": {
                "type": "string",
                "description": "Mode of transport (car, pedestrian, bicycle, etc.)",
                "enum": list(TRANSPORT_MODES),
            },
        }
    ),
)

PLACES_SEARCH_TOOL = ToolDefinition(
    name="maps_search_places",
    description="Search for places (e.g., restaurants, ATMs) near a specific location",
    parameter_schema=_object_schema(
        {
            "latitude": {"type": "number", "description": "Latitude of the location"},
            "longitude": {"type": "number", "description": "Longitude of the location"},
            "query": {
                "type": "string",
                "description": "Search query (e.g., 'coffee', 'restaurant')",
            },
        }
    ),
)

TRAFFIC_TOOL = ToolDefinition(
    name="maps_get_traffic_incidents",
    description="Retrieve traffic incidents within a circle",
    parameter_schema=_object_schema(
        {
            "center": {
                "type": "string",
                "description": "center coordinates in 'latitude,longitude' format",
            },
            "radius": {
                "type": "number",
                "description": "radius in meters, default is 1000 meters",
            },
        }
    ),
)

DISPLAY_TOOL = ToolDefinition(
    name="maps_display",
    description="Show a map with the given coordinates and zoom level",
    parameter_schema=_object_schema(
        {
            "center": {
                "type": "string",
                "description": "center coordinates in 'latitude,longitude' format",
            },
            "zoomLevel": {
                "type": "number",
                "description": (
                    "zoom level ranges from 0(global level) to 20(most zoomed-in level). "
                    "default is 14"
                ),
            },
            "style": {
                "type": "string",
                "description": _MAP_STYLE_DESCRIPTION,
                "enum": list(MAP_STYLES),
            },
        }
    ),
)

MAPS_TOOLS: tuple[ToolDefinition, ...] = (
    GEOCODE_TOOL,
    REVERSE_GEOCODE_TOOL,
    ROUTING_TOOL,
    PLACES_SEARCH_TOOL,
    TRAFFIC_TOOL,
    DISPLAY_TOOL,
)

_TOOLS_BY_NAME: dict[str, ToolDefinition] = {tool.name: tool for tool in MAPS_TOOLS}


def list_tools() -> tuple[ToolDefinition, ...]:
    """Return every advertised tool, always in the same order."""

    return MAPS_TOOLS


def get_tool(name: str) -> ToolDefinition | None:
    return _TOOLS_BY_NAME.get(name)
