"""FastMCP server configuration and lifecycle helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Collection, Mapping

from fastmcp import FastMCP
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools import Tool, ToolResult
from pydantic.json_schema import SkipJsonSchema

from ..core.config import MapsSettings, get_settings
from ..core.here_client import HereMapsClient
from ..core.logging_config import get_logger
from ..core.types import ToolInvocation
from .dispatcher import ToolDispatcher
from .registry import ToolDefinition, list_tools
from .schemas import ResultEnvelope

if TYPE_CHECKING:
    import mcp_types

logger = get_logger(__name__)

SERVER_NAME = "mcp-server/here-maps"
SERVER_VERSION = "0.1.0"


class MapsTool(Tool):
    """MCP tool that advertises a registry schema and forwards to the dispatcher."""

    dispatch: SkipJsonSchema[Callable[..., Any]]

    @classmethod
    def from_definition(cls, definition: ToolDefinition, dispatcher: ToolDispatcher) -> MapsTool:
        return cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.to_mcp_tool()["inputSchema"],
            dispatch=dispatcher.dispatch_invocation,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        envelope: ResultEnvelope = await self.dispatch(ToolInvocation(self.name, arguments))
        return to_tool_result(envelope)


class UnknownToolMiddleware(Middleware):
    """Answer calls to unregistered tools with the dispatcher's own envelope.

    FastMCP would otherwise reply with its generic not-found text.
    """

    def __init__(self, dispatcher: ToolDispatcher, tool_names: Collection[str]) -> None:
        self._dispatcher = dispatcher
        self._tool_names = frozenset(tool_names)

    async def on_call_tool(
        self,
        context: MiddlewareContext[mcp_types.CallToolRequestParams],
        call_next: CallNext[mcp_types.CallToolRequestParams, ToolResult],
    ) -> ToolResult:
        invocation = ToolInvocation(context.message.name, context.message.arguments or {})
        if invocation.name in self._tool_names:
            return await call_next(context)

        envelope = await self._dispatcher.dispatch_invocation(invocation)
        return to_tool_result(envelope)


def to_tool_result(envelope: ResultEnvelope) -> ToolResult:
    return ToolResult(
        content=envelope.text,
        is_error=envelope.is_error,
    )


def build_server(
    settings: MapsSettings | None = None,
    client: HereMapsClient | None = None,
) -> FastMCP:
    """Create the FastMCP server with every map tool registered."""

    settings = settings or get_settings()
    client = client or HereMapsClient(timeout=settings.http_timeout)
    dispatcher = ToolDispatcher(settings.here_maps_api_key.get_secret_value(), client)
    definitions = list_tools()

    unknown_tools = UnknownToolMiddleware(dispatcher, [definition.name for definition in definitions])
    server = FastMCP(SERVER_NAME, version=SERVER_VERSION, middleware=[unknown_tools])
    for definition in definitions:
        server.add_tool(MapsTool.from_definition(definition, dispatcher))

    logger.info("mcp_server_built", name=SERVER_NAME, tool_count=len(definitions))
    return server


async def call_tool(server: FastMCP, name: str, arguments: Mapping[str, Any]) -> ResultEnvelope:
    """Execute a tool through the server and return its envelope."""

    logger.debug("mcp_tool_call", name=name, arguments=arguments)
    tool_result = await server.call_tool(name, dict(arguments))
    return _envelope_from_tool_result(tool_result)


def get_tools_schema() -> list[dict[str, Any]]:
    """Expose the tool catalog in function-calling form for LLM clients."""

    schema: list[dict[str, Any]] = []
    for definition in list_tools():
        mcp_tool = definition.to_mcp_tool()
        schema.append(
            {
                "type": "function",
                "function": {
                    "name": mcp_tool["name"],
                    "description": mcp_tool["description"],
                    "parameters": mcp_tool["inputSchema"],
                },
            }
        )
    return schema


def _envelope_from_tool_result(tool_result: ToolResult) -> ResultEnvelope:
    """Convert a FastMCP ToolResult back into the envelope shape."""

    texts = [getattr(block, "text", str(block)) for block in tool_result.content]
    if not texts:
        texts = [""]
    return ResultEnvelope.from_texts(texts, is_error=tool_result.is_error)


def run_server(settings: MapsSettings | None = None) -> None:
    """Serve the map tools over stdio until the client disconnects."""

    server = build_server(settings)
    logger.info("server_starting", name=SERVER_NAME, transport="stdio")
    server.run(transport="stdio", show_banner=False)
