"""Services used by the bot handlers.

Contains the ffmpeg sticker encoder, the filesystem voice clip store and the
keep-alive HTTP listener used in polling deployments.
"""
