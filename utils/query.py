# utils/query.py
from typing import Optional

from utils.errors import EmptyQuery

AUDIO_SUFFIXES = (".mp3", ".m4a", ".flac", ".ogg", ".oga", ".opus", ".wav", ".aac")


def strip_audio_suffix(file_name: str) -> str:
    lowered = file_name.lower()
    for suffix in AUDIO_SUFFIXES:
        if lowered.endswith(suffix):
            return file_name[: -len(suffix)]
    return file_name


def extract_query(
    title: Optional[str],
    performer: Optional[str],
    file_name: Optional[str],
) -> str:
    """
    Builds a Spotify search query from audio metadata.
    - "<title> <performer>" when either is present.
    - Otherwise the filename without its audio suffix.
    Raises EmptyQuery when nothing usable is left.
    """
    query = f"{(title or '').strip()} {(performer or '').strip()}".strip()
    if not query:
        query = strip_audio_suffix(file_name or "").strip()
    if not query:
        raise EmptyQuery("audio metadata or filename is missing")
    return query


def query_from_audio(audio) -> str:
    """Same as extract_query, for an aiogram Audio object."""
    return extract_query(audio.title, audio.performer, audio.file_name)
