"""
utils package

Bot internals:
- config.py: environment settings
- logger.py: logging setup
- errors.py: exception hierarchy
- models.py: tracks, search results, replies
- query.py: search query from audio metadata
- spotify.py: spotipy search client
- middlewares.py: update logging and in-flight tracking
"""
