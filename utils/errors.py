# utils/errors.py
"""Exception hierarchy for the bot.

Only ConfigMissing is fatal. Everything else is scoped to a single update
and ends up in the dispatcher's errors handler.
"""


class BotError(Exception):
    """Base exception for all bot errors."""


class ConfigMissing(BotError):
    """A required environment variable is not set."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Environment variable not set: {key}")
        self.key = key


class EmptyQuery(BotError):
    """Audio carries neither usable metadata nor a filename."""


class SearchUnavailable(BotError):
    """Spotify search request failed."""


class ReplyDeliveryFailed(BotError):
    """Telegram rejected or dropped an outgoing reply."""


class RenderFailure(BotError):
    """A search result could not be rendered into a reply."""
