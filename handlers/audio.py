import logging
from aiogram import Router, F
from aiogram.exceptions import TelegramAPIError
from aiogram.types import Message

from templates.messages import MISSING_METADATA_TEXT, SEARCH_FAILED_TEXT, render_result
from utils.errors import EmptyQuery, ReplyDeliveryFailed, SearchUnavailable
from utils.models import OutboundReply
from utils.query import query_from_audio
from utils.spotify import SpotifySearch

router = Router(name="audio")
logger = logging.getLogger("audio")


async def send_reply(message: Message, reply: OutboundReply):
    try:
        return await message.reply(**reply.as_kwargs())
    except TelegramAPIError as e:
        raise ReplyDeliveryFailed(f"Failed to send message to chat {message.chat.id}: {e}") from e


async def send_reply_best_effort(message: Message, text: str):
    """Sends a plain notice; delivery problems are only logged."""
    try:
        await send_reply(message, OutboundReply(text=text))
    except ReplyDeliveryFailed:
        logger.exception("❌ Failed to send message")


@router.message(F.audio)
async def handle_audio(message: Message, spotify: SpotifySearch):
    """
    Looks up a received audio file on Spotify.
    - Query comes from title + performer, or the filename.
    - Replies with the best match, or a "no results" notice.
    """
    try:
        query = query_from_audio(message.audio)
    except EmptyQuery:
        await send_reply_best_effort(message, MISSING_METADATA_TEXT)
        raise

    logger.info(f"🎧 Searching Spotify for {query!r} (chat {message.chat.id})")
    try:
        result = await spotify.search(query)
    except SearchUnavailable:
        await send_reply_best_effort(message, SEARCH_FAILED_TEXT)
        raise

    reply = render_result(result)
    await send_reply(message, reply)
    logger.info(f"✅ Replied with {len(result.tracks)} match(es) for {query!r}")
