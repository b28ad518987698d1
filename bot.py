import argparse
import asyncio
import logging
import os
import sys
import time
from typing import Optional, Sequence

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.client.session.aiohttp import AiohttpSession
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramAPIError
from dotenv import find_dotenv, load_dotenv

from utils.config import Settings, load_settings
from utils.errors import ConfigMissing, SearchUnavailable
from utils.logger import LOG_LEVELS, configure_logging
from utils.middlewares import InFlightUpdates, UpdateLogger
from utils.spotify import SpotifySearch
from handlers.audio import router as audio_router
from handlers.fallback import router as fallback_router
from handlers.errors import router as errors_router

logger = logging.getLogger("Audio2Spotify")

# extra seconds on top of the long-poll timeout for each HTTP request
REQUEST_TIMEOUT_MARGIN = 10


# ───────────────────────────────────────────────
# CLI
# ───────────────────────────────────────────────
def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError("timeout value must not be negative")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="audio2spotify-bot",
        description="Telegram bot that finds audio files on Spotify.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=os.getenv("LOG_LEVEL", "debug").lower(),
        help="Set the log level (%(choices)s)",
    )
    parser.add_argument(
        "--timeout",
        type=_non_negative_int,
        default=10,
        help="Long polling timeout in seconds",
    )
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"argument --log-level: invalid choice: {args.log_level!r} (from LOG_LEVEL)")
    return args


async def on_shutdown(in_flight: InFlightUpdates, drain_on_shutdown: bool = False):
    logger.info("Received shutdown signal, stopping bot...")
    started = time.monotonic()
    if drain_on_shutdown:
        await in_flight.wait()
    logger.debug(f"Time took to stop {time.monotonic() - started:.3f}")


# ───────────────────────────────────────────────
# BOT FACTORY
# ───────────────────────────────────────────────
def make_bot(settings: Settings, timeout: int) -> Bot:
    return Bot(
        token=settings.telegram_token,
        session=AiohttpSession(timeout=timeout + REQUEST_TIMEOUT_MARGIN),
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )


def make_spotify(settings: Settings, timeout: int) -> SpotifySearch:
    return SpotifySearch(
        client_id=settings.spotify_client_id,
        client_secret=settings.spotify_client_secret,
        requests_timeout=timeout + REQUEST_TIMEOUT_MARGIN,
    )


def make_dispatcher(spotify: SpotifySearch, drain_on_shutdown: bool = False) -> Dispatcher:
    in_flight = InFlightUpdates()
    # without drain_on_shutdown, updates still running at stop are abandoned
    dp = Dispatcher(spotify=spotify, in_flight=in_flight, drain_on_shutdown=drain_on_shutdown)
    dp.update.outer_middleware(UpdateLogger())
    dp.update.outer_middleware(in_flight)

    dp.include_router(audio_router)
    dp.include_router(fallback_router)
    dp.include_router(errors_router)

    dp.shutdown.register(on_shutdown)
    return dp


# ───────────────────────────────────────────────
# HEALTH CHECK
# ───────────────────────────────────────────────
def health_check(settings: Settings):
    print("\n═════════════ 🎵 Audio2Spotify Startup Check ═════════════")
    print(f"💬 Telegram Token: {'✅ Loaded' if settings.telegram_token else '❌ Missing'}")
    print(f"🎧 Spotify ID: {'✅ Loaded' if settings.spotify_client_id else '❌ Missing'}")
    print(f"🎧 Spotify Secret: {'✅ Loaded' if settings.spotify_client_secret else '❌ Missing'}")
    print(f"🌍 Environment: {settings.environment}")
    print("══════════════════════════════════════════════════════════\n")


def exit_with(msg: str):
    print(msg, file=sys.stderr)
    sys.exit(1)


# ───────────────────────────────────────────────
# MAIN
# ───────────────────────────────────────────────
async def main(argv: Optional[Sequence[str]] = None):
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = load_settings()
    except ConfigMissing as e:
        exit_with(str(e))
    health_check(settings)
    logger.debug(f"Environment: {settings.environment}")

    spotify = make_spotify(settings, args.timeout)
    try:
        spotify.authenticate()
    except SearchUnavailable as e:
        logger.critical(f"❌ Error during Spotify token creation: {e}")
        exit_with(str(e))

    bot = make_bot(settings, args.timeout)
    # graceful drain only matters in production
    dp = make_dispatcher(spotify, drain_on_shutdown=settings.is_production)

    try:
        me = await bot.get_me()
    except TelegramAPIError as e:
        await bot.session.close()
        exit_with(f"Failed to create new bot: {e}")
    logger.info(f"🚀 Bot started: https://t.me/{me.username}")
    await dp.start_polling(
        bot,
        polling_timeout=args.timeout,
        allowed_updates=dp.resolve_used_update_types(),
    )


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
