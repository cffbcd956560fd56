"""Clip Bot Application Package.

Telegram bots built around short media clips:
- a video sticker bot that crops uploads into sticker-ready WebM clips
- a voice clip bot that stores voice messages and replays them by command name,
  runnable with long-polling or behind a webhook
"""
