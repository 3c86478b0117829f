import json

import httpx
import pytest
from fastmcp import Client

from heremaps_mcp.core.config import MapsSettings
from heremaps_mcp.core.here_client import HereMapsClient
from heremaps_mcp.mcp.registry import MAPS_TOOLS, get_tool
from heremaps_mcp.mcp.server import SERVER_NAME, build_server, call_tool, get_tools_schema


def _build(handler):
    settings = MapsSettings(_env_file=None, here_maps_api_key="server-key")
    client = HereMapsClient(transport=httpx.MockTransport(handler))
    return build_server(settings, client=client)


def _unreachable(request):
    raise httpx.ConnectError("unreachable", request=request)


@pytest.mark.asyncio
async def test_server_advertises_registry_schemas():
    server = _build(_unreachable)

    tools = await server.list_tools()

    assert server.name == SERVER_NAME
    assert sorted(tool.name for tool in tools) == sorted(tool.name for tool in MAPS_TOOLS)
    for tool in tools:
        definition = get_tool(tool.name)
        assert tool.description == definition.description
        assert tool.parameters == definition.to_mcp_tool()["inputSchema"]


@pytest.mark.asyncio
async def test_call_tool_returns_success_envelope():
    server = _build(_unreachable)

    envelope = await call_tool(
        server, "maps_display", {"center": "48.8566, 2.3522", "zoomLevel": 12, "style": "lite.night"}
    )

    assert envelope.is_error is False
    image_url = json.loads(envelope.text)["image_url"]
    assert "center:48.8566,2.3522;zoom=12" in image_url
    assert "apikey=server-key" in image_url


@pytest.mark.asyncio
async def test_call_tool_marks_failures_as_errors():
    server = _build(_unreachable)

    envelope = await call_tool(server, "maps_geocode", {"address": "Paris"})

    assert envelope.is_error is True
    assert envelope.text.startswith("Error: HERE Maps request failed")


@pytest.mark.asyncio
async def test_call_tool_soft_failure():
    server = _build(lambda request: httpx.Response(200, json={"items": []}))

    envelope = await call_tool(server, "maps_search_places", {"latitude": 1, "longitude": 2, "query": "ATM"})

    assert envelope.to_wire() == {
        "content": [{"type": "text", "text": "No places found for query: ATM"}],
        "isError": True,
    }


@pytest.mark.asyncio
async def test_call_tool_unknown_name():
    server = _build(_unreachable)

    envelope = await call_tool(server, "maps_teleport", {})

    assert envelope.is_error is True
    assert envelope.text == "Unknown tool: maps_teleport"


def test_tools_schema_for_llm_clients():
    schema = get_tools_schema()

    assert [entry["function"]["name"] for entry in schema] == [tool.name for tool in MAPS_TOOLS]
    assert all(entry["type"] == "function" for entry in schema)
    assert schema[0]["function"]["parameters"]["required"] == ["address"]


DISPLAY_ARGUMENTS = {"center": "52.5200, 13.4050", "zoomLevel": 10, "style": "explore.night"}


@pytest.mark.asyncio
async def test_client_lists_every_map_tool():
    server = _build(_unreachable)

    async with Client(server) as client:
        tools = await client.list_tools()

    assert sorted(tool.name for tool in tools) == sorted(tool.name for tool in MAPS_TOOLS)


@pytest.mark.asyncio
async def test_client_call_success():
    server = _build(_unreachable)

    async with Client(server) as client:
        result = await client.call_tool_mcp("maps_display", DISPLAY_ARGUMENTS)

    assert result.is_error is False
    assert len(result.content) == 1
    image_url = json.loads(result.content[0].text)["image_url"]
    assert image_url.startswith("https://maps.hereapi.com/mia/v3/base/mc/center:52.5200,13.4050;zoom=10/")
    assert "style=explore.night" in image_url


@pytest.mark.asyncio
async def test_client_call_soft_failure():
    server = _build(lambda request: httpx.Response(200, json={"items": []}))

    async with Client(server) as client:
        result = await client.call_tool_mcp(
            "maps_search_places", {"latitude": 52.5, "longitude": 13.4, "query": "bakery"}
        )

    assert result.is_error is True
    assert [block.text for block in result.content] == ["No places found for query: bakery"]


@pytest.mark.asyncio
async def test_client_call_hard_failure():
    server = _build(_unreachable)

    async with Client(server) as client:
        result = await client.call_tool_mcp("maps_geocode", {"address": "Alexanderplatz"})

    assert result.is_error is True
    assert result.content[0].text.startswith("Error: HERE Maps request failed")


@pytest.mark.asyncio
async def test_client_call_unknown_tool_uses_dispatcher_text():
    server = _build(_unreachable)

    async with Client(server) as client:
        result = await client.call_tool_mcp("maps_teleport", {"to": "Mars"})

    assert result.is_error is True
    assert [block.text for block in result.content] == ["Unknown tool: maps_teleport"]
