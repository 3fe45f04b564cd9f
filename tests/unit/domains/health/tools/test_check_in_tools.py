"""Unit tests for the check-in flow MCP tools."""

from __future__ import annotations

import asyncio
import json

import pytest
from fastmcp import Client

from pulsecheck.core.server.app import create_app
from pulsecheck.domains.health.connectors.posture_scan import MockPostureScanner


def _run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio required)."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def _payload(result) -> dict:
    return json.loads(result.content[0].text)


@pytest.fixture
def client(session, seeded_scanner):
    mcp = create_app(posture_scanner_override=seeded_scanner, session_override=session)
    return Client(mcp)


class TestSignUp:
    def test_profile_and_baseline(self, client, session):
        async def _check():
            async with client:
                result = await client.call_tool(
                    "sign_up",
                    {"name": "Ana", "age": "34", "gender": "female", "weight": "80", "height": "170"},
                )
                data = _payload(result)
                assert data["profile"]["name"] == "Ana"
                assert data["profile"]["gender"] == "female"
                assert data["baseline_metrics"]["bmi"] == 27.7
        _run(_check())
        assert session.profile.weight == 80

    def test_blank_measurements_use_defaults(self, client):
        async def _check():
            async with client:
                data = _payload(await client.call_tool("sign_up", {"weight": "", "height": "0"}))
                assert data["profile"]["weight"] == 60.0
                assert data["profile"]["height"] == 165.0
        _run(_check())


class TestLenientSignUp:
    def test_rejected_profile_keeps_previous(self, monkeypatch, session, seeded_scanner):
        monkeypatch.setenv("STRICT_INPUT_VALIDATION", "false")
        client = Client(create_app(posture_scanner_override=seeded_scanner, session_override=session))

        async def _check():
            async with client:
                data = _payload(await client.call_tool("sign_up", {"height": -170}))
                assert data["status"] == "error"
                assert data["field"] == "height"
                submitted = _payload(await client.call_tool("submit_check_in", {}))
                assert submitted["status"] == "ok"
                assert submitted["metrics"]["bmi"] == 22.0
        _run(_check())
        assert session.profile.height == 165.0


class TestUpdateDailyInput:
    def test_partial_updates_accumulate(self, client):
        async def _check():
            async with client:
                await client.call_tool("update_daily_input", {"sleep": 7.5, "mood": 2})
                data = _payload(await client.call_tool("update_daily_input", {"water": 6}))
                pending = data["pending_input"]
                assert pending["sleep"] == 7.5
                assert pending["mood"] == 2
                assert pending["water"] == 6
        _run(_check())

    def test_invalid_value_leaves_pending_untouched(self, client, session):
        async def _check():
            async with client:
                data = _payload(await client.call_tool("update_daily_input", {"mood": 8}))
                assert data["status"] == "error"
        _run(_check())
        assert session.pending_input.mood == 3


class TestPostureScan:
    def test_run_scan_captures(self, client):
        async def _check():
            async with client:
                data = _payload(await client.call_tool("run_posture_scan", {}))
                assert data["outcome"] == "captured"
                assert 75 <= data["posture_score"] <= 94
                assert data["pending_input"]["posture_score"] == data["posture_score"]
        _run(_check())

    def test_skip_uses_default(self, client):
        async def _check():
            async with client:
                data = _payload(await client.call_tool("skip_posture_scan", {}))
                assert data["posture_score"] == 82
                assert data["outcome"] == "skipped"
        _run(_check())

    def test_denied_camera_uses_default(self, session):
        scanner = MockPostureScanner(delay_seconds=0, available=False)
        client = Client(create_app(posture_scanner_override=scanner, session_override=session))

        async def _check():
            async with client:
                data = _payload(await client.call_tool("run_posture_scan", {}))
                assert data["outcome"] == "denied"
                assert data["posture_score"] == 82
        _run(_check())


class TestSubmitCheckIn:
    def test_submit_and_reset(self, client, session):
        async def _check():
            async with client:
                await client.call_tool(
                    "update_daily_input",
                    {"mood": 3, "sleep": 8, "activity": 60, "water": 8, "screen_time": 2},
                )
                await client.call_tool("skip_posture_scan", {})
                data = _payload(await client.call_tool("submit_check_in", {}))
                # posture 82 scores 12 instead of 15
                assert data["metrics"]["score"] == 91
                assert [r["kind"] for r in data["recommendations"]] == ["maintain_weight"]

                state = _payload(await client.call_tool("get_check_in_state", {}))
                assert state["pending_input"]["sleep"] == 0.0
                assert state["last_metrics"]["score"] == 91
        _run(_check())
        assert session.last_result is not None

    def test_state_before_any_submit(self, client):
        async def _check():
            async with client:
                state = _payload(await client.call_tool("get_check_in_state", {}))
                assert state["last_metrics"] is None
                assert state["profile"]["name"] == "User"
        _run(_check())
