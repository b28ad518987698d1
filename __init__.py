"""
audio2spotify bot

Telegram bot that finds audio files on Spotify.
Contains:
- bot.py entrypoint
- handlers for incoming messages
- utils for config, logging, and Spotify search
- templates for reply texts and keyboards
"""
