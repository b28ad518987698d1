"""
handlers package

Contains aiogram routers, included in this order:
- audio.py: audio files -> Spotify search -> reply
- fallback.py: anything else gets a "send me audio" hint
- errors.py: logs handler failures so polling keeps going
"""
