"""
templates package

Reply texts and inline keyboards:
- messages.py: fixed texts and search result rendering
- buttons.py: Spotify search button
"""
