"""MCP tool server exposing HERE Maps geocoding, routing, search, traffic and static maps."""

__version__ = "0.1.0"
