# utils/models.py
from dataclasses import dataclass
from typing import Any, Optional

from aiogram.enums import ParseMode
from aiogram.types import InlineKeyboardMarkup, LinkPreviewOptions


@dataclass(frozen=True)
class Track:
    name: str
    artists: tuple[str, ...]
    url: str

    @classmethod
    def from_api(cls, item: dict) -> "Track":
        """Builds a track from a Spotify track object."""
        return cls(
            name=item.get("name") or "",
            artists=tuple(a.get("name") or "" for a in item.get("artists") or []),
            url=(item.get("external_urls") or {}).get("spotify") or "",
        )


@dataclass(frozen=True)
class SearchResult:
    query: str
    tracks: tuple[Track, ...] = ()
    total: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.tracks

    @property
    def first(self) -> Optional[Track]:
        # Spotify ranks by relevance, only the best match is shown
        return self.tracks[0] if self.tracks else None


@dataclass
class OutboundReply:
    text: str
    parse_mode: Optional[ParseMode] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    link_preview_options: Optional[LinkPreviewOptions] = None

    def as_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for Message.reply."""
        kwargs = {"text": self.text, "parse_mode": self.parse_mode}
        if self.reply_markup is not None:
            kwargs["reply_markup"] = self.reply_markup
        if self.link_preview_options is not None:
            kwargs["link_preview_options"] = self.link_preview_options
        return kwargs
