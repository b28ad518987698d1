from aiogram import Router
from aiogram.types import Message

from handlers.audio import send_reply
from templates.messages import NO_AUDIO_TEXT
from utils.models import OutboundReply

router = Router(name="fallback")


@router.message()
async def handle_unknown(message: Message):
    await send_reply(message, OutboundReply(text=NO_AUDIO_TEXT))
