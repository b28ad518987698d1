"""Tests for utils/middlewares.py -- raw update logging and shutdown drain."""

import asyncio
import logging

import pytest
from aiogram.types import Update

from utils.middlewares import InFlightUpdates, UpdateLogger


def _update():
    return Update.model_validate({
        "update_id": 5,
        "message": {
            "message_id": 1,
            "date": 1700000000,
            "chat": {"id": 42, "type": "private"},
            "text": "hi",
        },
    })


async def _echo(event, data):
    return "handled"


class TestUpdateLogger:
    @pytest.mark.asyncio
    async def test_logs_raw_update_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="updates"):
            result = await UpdateLogger()(_echo, _update(), {})
        assert result == "handled"
        assert '"update_id":5' in caplog.text

    @pytest.mark.asyncio
    async def test_silent_above_debug(self, caplog):
        with caplog.at_level(logging.INFO, logger="updates"):
            result = await UpdateLogger()(_echo, _update(), {})
        assert result == "handled"
        assert caplog.text == ""

    @pytest.mark.asyncio
    async def test_always_passes_on(self):
        calls = []

        async def handler(event, data):
            calls.append(event.update_id)

        await UpdateLogger()(handler, _update(), {})
        assert calls == [5]


class TestInFlightUpdates:
    @pytest.mark.asyncio
    async def test_wait_blocks_until_handlers_finish(self):
        tracker = InFlightUpdates()
        release = asyncio.Event()
        finished = []

        async def handler(event, data):
            await release.wait()
            finished.append(event)
            return "ok"

        task = asyncio.create_task(tracker(handler, "update", {}))
        await asyncio.sleep(0)
        assert len(tracker) == 1

        waiter = asyncio.create_task(tracker.wait())
        await asyncio.sleep(0)
        assert not waiter.done()

        release.set()
        await waiter
        assert finished == ["update"]
        assert await task == "ok"
        assert len(tracker) == 0

    @pytest.mark.asyncio
    async def test_failed_handler_still_released(self):
        tracker = InFlightUpdates()

        async def handler(event, data):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await tracker(handler, "update", {})
        assert len(tracker) == 0
        await tracker.wait()

    @pytest.mark.asyncio
    async def test_wait_with_nothing_running(self):
        await InFlightUpdates().wait()
