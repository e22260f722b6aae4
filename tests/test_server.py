"""Tests for the eunit-pipeline MCP server."""

import pytest


class TestServerBasics:
    """Basic server tests."""

    def test_version(self):
        """Test version is defined."""
        from eunit_pipeline import __version__
        assert __version__ == "0.1.0"

    def test_server_creation(self):
        """Test server can be created."""
        from eunit_pipeline.server import server
        assert server.name == "eunit-pipeline"

    def test_tools_registered(self):
        from eunit_pipeline.server import ALL_HANDLERS, ALL_TOOLS
        assert [t.name for t in ALL_TOOLS] == ["run_eunit"]
        assert set(ALL_HANDLERS) == {"run_eunit"}

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        from eunit_pipeline.server import call_tool
        result = await call_tool("nope", {})
        assert result[0].text == "Unknown tool: nope"
