"""Tests for the Figma REST adapter behind the MCP tools.

REST calls are replaced with monkeypatch; nothing hits the network.

Run:
    pytest tests/test_figma_tools.py -v
"""

import logging

import pytest
import requests

import figma_tools
from plugin import NO_SELECTION_NOTICE, SUCCESS_NOTICE


NODES_RESPONSE = {
    "nodes": {
        "1:2": {
            "document": {
                "id": "1:2",
                "type": "FRAME",
                "fills": [{"type": "SOLID", "color": {"r": 0.0, "g": 0.0, "b": 0.0, "a": 1.0}}],
                "children": [
                    {"id": "1:3", "type": "RECTANGLE", "fills": [{"type": "SOLID", "color": {"r": 1.0, "g": 1.0, "b": 1.0, "a": 1.0}}]},
                ],
            }
        },
        "4:5": {"document": {"id": "4:5", "type": "TEXT", "fills": []}},
    }
}


@pytest.fixture
def fake_api(monkeypatch):
    calls = []

    def fake_get(path, params=None):
        calls.append((path, params))
        return NODES_RESPONSE

    monkeypatch.setattr(figma_tools, "figma_api_get", fake_get)
    return calls


class TestFetchNodes:
    def test_normalizes_ids_and_keeps_order(self, fake_api):
        docs = figma_tools.fetch_nodes("FILE", "4-5, 1-2")
        assert [d["id"] for d in docs] == ["4:5", "1:2"]
        assert fake_api == [("/files/FILE/nodes", {"ids": "4:5,1:2"})]

    def test_empty_ids_skip_request(self, fake_api):
        assert figma_tools.fetch_nodes("FILE", " ") == []
        assert fake_api == []

    def test_unknown_id(self, fake_api):
        with pytest.raises(KeyError, match="9:9"):
            figma_tools.fetch_nodes("FILE", "9:9")


class TestDarkModeForNodes:
    def test_recolors_selection(self, fake_api):
        result = figma_tools.dark_mode_for_nodes("FILE", "1:2")
        assert result["notice"] == SUCCESS_NOTICE
        assert result["recolored_fills"] == 2

        frame = result["design"][0]
        assert frame["fills"][0]["color"] == {"r": 1.0, "g": 1.0, "b": 1.0, "a": 1.0}
        assert frame["children"][0]["fills"][0]["color"] == {"r": 0.0, "g": 0.0, "b": 0.0, "a": 1.0}

    def test_nothing_selected(self, fake_api):
        result = figma_tools.dark_mode_for_nodes("FILE", "")
        assert result == {"notice": NO_SELECTION_NOTICE, "design": [], "recolored_fills": 0}


class TestFigmaApiGet:
    def test_missing_key(self, monkeypatch):
        monkeypatch.setattr(figma_tools, "FIGMA_API_KEY", None)
        with pytest.raises(RuntimeError, match="FIGMA_API_KEY"):
            figma_tools.figma_api_get("/files/FILE")

    def test_sends_token(self, monkeypatch):
        seen = {}

        class FakeResponse:
            def raise_for_status(self):
                pass

            def json(self):
                return {"ok": True}

        def fake_requests_get(url, headers=None, params=None, timeout=None):
            seen.update(url=url, headers=headers, params=params, timeout=timeout)
            return FakeResponse()

        monkeypatch.setattr(figma_tools, "FIGMA_API_KEY", "secret")
        monkeypatch.setattr(requests, "get", fake_requests_get)

        assert figma_tools.figma_api_get("/files/FILE", params={"depth": 1}) == {"ok": True}
        assert seen["url"] == f"{figma_tools.FIGMA_API_BASE_URL}/files/FILE"
        assert seen["headers"] == {"X-Figma-Token": "secret"}
        assert seen["params"] == {"depth": 1}
        assert seen["timeout"] == figma_tools.FIGMA_API_TIMEOUT


def test_transform_hex():
    assert figma_tools.transform_hex("#000000")["output"] == "#ffffff"
    assert figma_tools.transform_hex("#fff")["output"] == "#000000"
    assert figma_tools.transform_hex("#808080")["input"] == "#808080"


class TestTools:
    def test_apply_dark_mode(self, fake_api):
        result = figma_tools.apply_dark_mode("FILE", "1-2")
        assert result["notice"] == SUCCESS_NOTICE
        assert [n["id"] for n in result["design"]] == ["1:2"]

    def test_apply_dark_mode_unknown_node(self, fake_api, caplog):
        caplog.set_level(logging.ERROR, logger="figma_tools")
        result = figma_tools.apply_dark_mode("FILE", "9:9")

        assert result["error"].startswith("Failed to apply dark mode: ")
        assert "9:9" in result["error"]
        record = caplog.records[-1]
        assert record.getMessage() == "apply_dark_mode failed"
        assert record.exc_info[0] is KeyError

    def test_transform_color(self):
        result = figma_tools.transform_color("#000000")
        assert result["input"] == "#000000"
        assert result["output"] == "#ffffff"
        assert result["rgb"] == {"r": 1.0, "g": 1.0, "b": 1.0}

    def test_transform_color_bad_hex(self, caplog):
        caplog.set_level(logging.ERROR, logger="figma_tools")
        result = figma_tools.transform_color("#-1-2-3")

        assert result == {"error": "Failed to transform color: Invalid hex color: '#-1-2-3'"}
        record = caplog.records[-1]
        assert record.getMessage() == "transform_color failed"
        assert record.exc_info[0] is ValueError
