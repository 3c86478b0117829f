"""Map tool catalog, dispatch and FastMCP wiring."""

from .dispatcher import ROUTES, ToolDispatcher
from .registry import MAPS_TOOLS, ToolDefinition, list_tools
from .schemas import ResultEnvelope

__all__ = [
    "MAPS_TOOLS",
    "ROUTES",
    "ResultEnvelope",
    "ToolDefinition",
    "ToolDispatcher",
    "list_tools",
]
