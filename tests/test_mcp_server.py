import json

import pytest
from mcp import types

import core.api.deliberate_thinking as deliberate_thinking_module
from core.errors import InvalidParameterError
from server.mcp_stdio import DeliberateThinkingMCPServer


def _arguments(**fields):
    arguments = {"thought": "step", "nextThoughtNeeded": True, "thoughtNumber": 1, "totalThoughts": 3}
    arguments.update(fields)
    return arguments


async def _call(mcp_server: DeliberateThinkingMCPServer, name: str, arguments: dict) -> types.CallToolResult:
    """Dispatch a tools/call request the way the MCP runtime does."""
    handler = mcp_server.server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await handler(request)
    return result.root


def test_server_instance():
    mcp_server = DeliberateThinkingMCPServer()
    assert mcp_server.server.name == "deliberate-thinking"


@pytest.mark.asyncio
async def test_list_tools_advertises_wire_schema():
    tools = await DeliberateThinkingMCPServer().list_tools()

    assert [t.name for t in tools] == ["deliberatethinking"]
    schema = tools[0].inputSchema
    assert set(schema["required"]) == {"thought", "nextThoughtNeeded", "thoughtNumber", "totalThoughts"}
    assert schema["properties"]["thoughtNumber"]["minimum"] == 1
    assert "branchId" in schema["properties"]


@pytest.mark.asyncio
async def test_call_tool_returns_json_text():
    mcp_server = DeliberateThinkingMCPServer()

    await mcp_server.call_tool("deliberatethinking", _arguments(thought="A"))
    content = await mcp_server.call_tool(
        "deliberatethinking",
        _arguments(thought="B-alt", thoughtNumber=2, branchFromThought=1, branchId="alt"),
    )

    assert len(content) == 1
    assert content[0].type == "text"
    payload = json.loads(content[0].text)
    assert payload["branches"] == ["alt"]
    assert payload["thoughtHistoryLength"] == 2


@pytest.mark.asyncio
async def test_call_tool_raises_core_validation_error():
    mcp_server = DeliberateThinkingMCPServer()

    with pytest.raises(InvalidParameterError):
        await mcp_server.call_tool("deliberatethinking", _arguments(thoughtNumber=0))


@pytest.mark.asyncio
async def test_runtime_dispatch_records_thought():
    mcp_server = DeliberateThinkingMCPServer()

    result = await _call(mcp_server, "deliberatethinking", _arguments(thought="A"))

    assert not result.isError
    assert json.loads(result.content[0].text) == {
        "thoughtNumber": 1,
        "totalThoughts": 3,
        "nextThoughtNeeded": True,
        "branches": [],
        "thoughtHistoryLength": 1,
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["thoughtNumber", "totalThoughts", "revisesThought", "branchFromThought"])
async def test_runtime_dispatch_reports_field_from_core_validator(field):
    mcp_server = DeliberateThinkingMCPServer()

    result = await _call(mcp_server, "deliberatethinking", _arguments(**{field: 0}))

    assert result.isError
    assert result.content[0].text == f"{field} must be at least 1"
    assert mcp_server.system.ledger.history_length() == 0


@pytest.mark.asyncio
async def test_runtime_dispatch_reports_serialization_failure(monkeypatch):
    def broken(response):
        raise ValueError("boom")

    monkeypatch.setattr(deliberate_thinking_module, "serialize_response", broken)
    mcp_server = DeliberateThinkingMCPServer()

    result = await _call(mcp_server, "deliberatethinking", _arguments())

    assert result.isError
    assert result.content[0].text == "Failed to serialize response: boom"
    assert mcp_server.system.ledger.history_length() == 1


@pytest.mark.asyncio
async def test_runtime_dispatch_reports_unknown_tool():
    mcp_server = DeliberateThinkingMCPServer()

    result = await _call(mcp_server, "sequentialthinking", _arguments())

    assert result.isError
    assert result.content[0].text == "Unknown tool: sequentialthinking"
    assert mcp_server.system.ledger.history_length() == 0
