"""
Tests for the registered API functions and their MCP exposure.
"""

import asyncio

from lens_tracker.api import call_api, get_api_functions
from lens_tracker.services.mcp import server

EXPECTED_TOOLS = {"get_state", "save_start_date", "list_available_tools"}


def test_mcp_server_exposes_every_api_function():
    tool_names = {tool.name for tool in asyncio.run(server.list_tools())}
    assert EXPECTED_TOOLS <= tool_names
    assert {func.name for func in get_api_functions()} <= tool_names


def test_list_available_tools_describes_functions():
    tools = {tool["name"]: tool for tool in call_api("list_available_tools")["tools"]}

    assert EXPECTED_TOOLS <= set(tools)
    save = tools["save_start_date"]
    assert save["category"] == "lenses"
    assert save["parameters"] == {"type": "object", "properties": {"start_date": {"type": "string"}}}
    assert tools["get_state"]["parameters"] == {"type": "object", "properties": {}}


def test_tools_are_sorted_by_name():
    names = [tool["name"] for tool in call_api("list_available_tools")["tools"]]
    assert names == sorted(names)
