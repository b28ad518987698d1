import logging
from aiogram import Router
from aiogram.types import ErrorEvent

router = Router(name="errors")
logger = logging.getLogger("errors")


@router.errors()
async def on_error(event: ErrorEvent):
    """Logs a failed update and lets polling carry on with the next one."""
    update_id = event.update.update_id if event.update else None
    logger.error(
        f"❌ An error occurred while handling update {update_id}: {event.exception}",
        exc_info=event.exception,
    )
    return True
