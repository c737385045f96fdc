"""
Tests for the tool table, argument validation and resources.
"""

import pytest

import resources
import tools

from conftest import respond_json


class TestToolTable:
    """Tests for the registered tools."""

    def test_every_tool_has_a_handler(self):
        names = [tool.name for tool in tools.TOOLS]

        assert sorted(names) == sorted(tools._HANDLERS)
        assert len(names) == 8

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        with pytest.raises(ValueError, match="Unknown tool: trello_nope"):
            await tools.call_tool("trello_nope", {})


class TestArgumentValidation:
    """Arguments are checked against the tool schema before the handler runs."""

    @pytest.mark.asyncio
    async def test_missing_required(self, make_context):
        ctx, recorder = make_context()

        result = await tools.call_tool("trello_add", {"list_id": "l1"}, ctx)

        assert result[0].text.startswith("❌ Invalid arguments for trello_add:")
        assert "'name' is a required property" in result[0].text
        assert recorder.count == 0

    @pytest.mark.asyncio
    async def test_wrong_type(self, make_context):
        ctx, recorder = make_context()

        result = await tools.call_tool("trello_update", {"card_id": "c1", "closed": "yes"}, ctx)

        assert result[0].text.startswith("❌ Invalid arguments for trello_update:")
        assert recorder.count == 0

    @pytest.mark.asyncio
    async def test_unexpected_field(self, make_context):
        ctx, recorder = make_context()

        result = await tools.call_tool("trello_done", {"card_id": "c1", "force": True}, ctx)

        assert result[0].text.startswith("❌ Invalid arguments for trello_done:")
        assert recorder.count == 0

    @pytest.mark.asyncio
    async def test_valid_call_reaches_handler(self, make_context):
        ctx, recorder = make_context(respond_json([]))

        result = await tools.call_tool("trello_lists", None, ctx)

        assert result[0].text == "📭 No lists found."
        assert recorder.count == 1


class TestInfoResource:
    """Tests for trello://info."""

    def test_configured(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TRELLO_MCP_CONFIG", str(tmp_path / "none.json"))
        monkeypatch.setenv("TRELLO_API_KEY", "abcdef1234567890")
        monkeypatch.setenv("TRELLO_API_TOKEN", "secret-token")
        monkeypatch.setenv("TRELLO_BOARD_ID", "board123")
        monkeypatch.delenv("TRELLO_DEFAULT_LIST_ID", raising=False)

        text = resources.read_resource("trello://info")

        assert "Status: configured" in text
        assert "API key: abcdef12..." in text
        assert "abcdef1234567890" not in text
        assert "secret-token" not in text
        assert "Board ID: board123" in text

    def test_not_configured(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TRELLO_MCP_CONFIG", str(tmp_path / "none.json"))
        for var in ("TRELLO_API_KEY", "TRELLO_API_TOKEN", "TRELLO_BOARD_ID"):
            monkeypatch.delenv(var, raising=False)

        text = resources.read_resource("trello://info")

        assert "Status: not configured" in text
        assert "TRELLO_API_KEY" in text

    def test_unknown_resource(self):
        with pytest.raises(ValueError):
            resources.read_resource("trello://nope")
