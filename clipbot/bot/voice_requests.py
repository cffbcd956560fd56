"""Pending voice clip requests.

After ``/add <name>`` the next voice message from the same user is stored
under that name. The mapping lives in memory only; a restart forgets
unfinished requests.
"""

import logging
from typing import Dict

logger = logging.getLogger(__name__)

# User ID -> clip name awaiting a voice message
pending_requests: Dict[int, str] = {}


def request_clip(user_id: int, name: str) -> None:
    """Remember that the user's next voice message is stored as ``name``.

    A newer request replaces an older one.
    """
    pending_requests[user_id] = name
    logger.info(f"User {user_id} requested voice clip /{name}")


def pending_name(user_id: int) -> str | None:
    """Get the clip name the user is expected to record, if any."""
    return pending_requests.get(user_id)


def clear_request(user_id: int) -> str | None:
    """Drop the user's pending request.

    Returns:
        The name that was pending, or None.
    """
    return pending_requests.pop(user_id, None)
