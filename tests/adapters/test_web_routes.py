"""Unit tests for the web routes."""

import asyncio

import pytest
from unittest.mock import patch
from httpx import AsyncClient, ASGITransport

from coding_specialist.adapters.web.server import app
from coding_specialist.domain.dispatcher import Dispatcher
from coding_specialist.domain.templates import NO_CODE_TO_ANALYZE, NO_PROMPT_TO_WRITE


@pytest.fixture
def transport():
    return ASGITransport(app=app)


@pytest.fixture
def dispatcher():
    """Zero-delay dispatcher swapped in for the module-level one."""
    d = Dispatcher()
    with patch("coding_specialist.adapters.web.routes.dispatcher", d):
        yield d


class GatedDelay:
    """Delay whose waits finish only when the test opens their gate."""

    def __init__(self):
        self.gates = []

    async def wait(self):
        gate = asyncio.Event()
        self.gates.append(gate)
        await gate.wait()

    def cancel(self):
        return 0


@pytest.fixture
def gated():
    """Dispatcher whose delay the test releases by hand."""
    delay = GatedDelay()
    d = Dispatcher(delay=delay)
    with patch("coding_specialist.adapters.web.routes.dispatcher", d):
        yield d, delay


class TestActions:
    @pytest.mark.asyncio
    async def test_lists_six_actions_in_order(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/api/actions")
        assert resp.status_code == 200
        actions = resp.json()["actions"]
        assert [a["type"] for a in actions] == [
            "analyze", "write", "improve", "refactor", "debug", "expand",
        ]
        assert actions[0] == {
            "type": "analyze",
            "label": "Analyze",
            "description": "Deep analysis of code quality",
        }


class TestDispatch:
    @pytest.mark.asyncio
    async def test_analyze(self, transport, dispatcher):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/api/dispatch", json={"action": "analyze", "code": "a\nb\nc"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["type"] == "analyze"
        assert "Lines of code: 3" in data["result"]
        assert data["timestamp"]

    @pytest.mark.asyncio
    async def test_write_echoes_prompt(self, transport, dispatcher):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/api/dispatch", json={"action": "write", "prompt": "make a <button>"})
        assert resp.status_code == 200
        assert "make a <button>" in resp.json()["result"]

    @pytest.mark.asyncio
    async def test_empty_inputs_give_warning(self, transport, dispatcher):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            analyze = await ac.post("/api/dispatch", json={"action": "analyze"})
            write = await ac.post("/api/dispatch", json={"action": "write", "code": "x = 1"})
        assert analyze.json()["result"] == NO_CODE_TO_ANALYZE
        assert write.json()["result"] == NO_PROMPT_TO_WRITE

    @pytest.mark.asyncio
    async def test_unknown_action(self, transport, dispatcher):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/api/dispatch", json={"action": "summarize", "code": "x"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_action(self, transport, dispatcher):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/api/dispatch", json={"code": "x"})
        assert resp.status_code == 422


class TestCurrentReport:
    @pytest.mark.asyncio
    async def test_empty_before_first_dispatch(self, transport, dispatcher):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/api/report")
        assert resp.status_code == 200
        assert resp.json() == {"report": None, "processing": False}

    @pytest.mark.asyncio
    async def test_last_dispatch_replaces_previous(self, transport, dispatcher):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            await ac.post("/api/dispatch", json={"action": "debug", "code": "x"})
            await ac.post("/api/dispatch", json={"action": "refactor", "code": "x"})
            resp = await ac.get("/api/report")
        report = resp.json()["report"]
        assert report["type"] == "refactor"
        assert report["result"].startswith("## Refactored Code")


class TestPage:
    @pytest.mark.asyncio
    async def test_root_renders_buttons(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        body = resp.text
        assert "AI Coding Specialist" in body
        for action in ("analyze", "write", "improve", "refactor", "debug", "expand"):
            assert f"runAction('{action}')" in body
        assert 'title="Restructure for maintainability"' in body
        assert "How to Use" in body

    @pytest.mark.asyncio
    async def test_status(self, transport, dispatcher):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            before = (await ac.get("/status")).json()
            await ac.post("/api/dispatch", json={"action": "improve", "code": "x"})
            after = (await ac.get("/status")).json()
        assert before["sessionId"]
        assert before["processing"] is False
        assert before["lastReportAt"] is None
        assert after["lastReportAt"] == dispatcher.current.timestamp.isoformat()


class TestInFlight:
    @pytest.mark.asyncio
    async def test_processing_reported_while_dispatch_pending(self, transport, gated):
        dispatcher, delay = gated
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            pending = asyncio.create_task(
                ac.post("/api/dispatch", json={"action": "debug", "code": "x"})
            )
            for _ in range(100):
                if delay.gates:
                    break
                await asyncio.sleep(0)
            assert len(delay.gates) == 1

            report = (await ac.get("/api/report")).json()
            status = (await ac.get("/status")).json()
            assert report == {"report": None, "processing": True}
            assert status["processing"] is True
            assert status["lastReportAt"] is None

            delay.gates[0].set()
            resp = await pending
            assert resp.status_code == 200

            report = (await ac.get("/api/report")).json()
            status = (await ac.get("/status")).json()
        assert report["processing"] is False
        assert report["report"]["type"] == "debug"
        assert status["processing"] is False
        assert status["lastReportAt"] == dispatcher.current.timestamp.isoformat()
