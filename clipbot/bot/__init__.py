"""Telegram bot implementation package.

Contains the handlers of both bots, the command menu publisher, the pending
voice clip requests and the user-facing message templates.
"""
