# templates/messages.py
import html

from aiogram.enums import ParseMode
from aiogram.types import LinkPreviewOptions
from aiogram.utils.markdown import hbold, hlink

from templates.buttons import search_kb
from utils.errors import RenderFailure
from utils.models import OutboundReply, SearchResult, Track

NO_AUDIO_TEXT = "Send me an audio file to search on Spotify."

MISSING_METADATA_TEXT = "Audio metadata or filename is missing."

SEARCH_FAILED_TEXT = "Failed to search Spotify."

NO_RESULTS_TEXT = "No results found on Spotify by query `{query}`"

TRACK_TEXT = "{link}\nby {artists}"


def build_track_text(track: Track) -> str:
    """HTML text for a track. Name and artists come from Spotify and get escaped."""
    if not track.url:
        raise RenderFailure(f"Track {track.name!r} has no Spotify URL")
    if not track.name:
        raise RenderFailure(f"Track at {track.url} has no name")
    return TRACK_TEXT.format(
        link=hlink(track.name, html.escape(track.url)),
        artists=hbold(", ".join(track.artists)),
    )


def render_result(result: SearchResult) -> OutboundReply:
    """
    Turns a search result into a reply.
    - Nothing found: plain text with the query and a Search button.
    - Otherwise: the best match as an HTML link plus its artists.
    """
    keyboard = search_kb(result.query)
    track = result.first
    if track is None:
        return OutboundReply(
            text=NO_RESULTS_TEXT.format(query=result.query),
            reply_markup=keyboard,
        )

    return OutboundReply(
        text=build_track_text(track),
        parse_mode=ParseMode.HTML,
        reply_markup=keyboard,
        link_preview_options=LinkPreviewOptions(
            prefer_small_media=True,
            show_above_text=True,
        ),
    )
