# utils/middlewares.py
import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

logger = logging.getLogger("updates")

Handler = Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]]


class UpdateLogger(BaseMiddleware):
    """Logs every raw update at DEBUG, then hands it on unchanged."""

    async def __call__(self, handler: Handler, event: TelegramObject, data: Dict[str, Any]) -> Any:
        # skip the JSON dump entirely unless someone will see it
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Handling update: {event.model_dump_json(exclude_none=True)}")
        return await handler(event, data)


class InFlightUpdates(BaseMiddleware):
    """Tracks update handlers that are still running so shutdown can wait for them."""

    def __init__(self):
        self._tasks: set[asyncio.Task] = set()

    def __len__(self) -> int:
        return len(self._tasks)

    async def __call__(self, handler: Handler, event: TelegramObject, data: Dict[str, Any]) -> Any:
        task = asyncio.current_task()
        if task is not None:
            self._tasks.add(task)
        try:
            return await handler(event, data)
        finally:
            self._tasks.discard(task)

    async def wait(self) -> None:
        current = asyncio.current_task()
        pending = [t for t in self._tasks if t is not current and not t.done()]
        if not pending:
            return
        logger.info(f"Waiting for {len(pending)} update(s) to finish...")
        await asyncio.gather(*pending, return_exceptions=True)
