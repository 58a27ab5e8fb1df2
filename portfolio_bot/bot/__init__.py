"""Telegram bot implementation package.

Contains all Telegram bot specific functionality including update handlers,
the menu engine with its pagination state, keyboard builders, the job request
relay and user-facing message templates.
"""
