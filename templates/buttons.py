from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from utils.spotify import spotify_search_url


def search_kb(query: str):
    """Single "Search" button opening Spotify web search for the query."""
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(text="Search", url=spotify_search_url(query)),
            ]
        ]
    )
