"""Short unique identifier helpers.

Public identifiers for data sources, correlations and playlists are short
random strings. They are readable in URLs and always start with a letter so they
never look like a numeric id.
"""

from __future__ import annotations

import random
import re
import uuid
from typing import Awaitable, Callable, Type

from panelhub.core.logging_config import get_logger

logger = get_logger(__name__)

SHORT_UID_LENGTH = 14
MAX_UID_LENGTH = 40

_HEX_LETTERS = "abcdef"
_VALID_UID_PATTERN = re.compile(r"^[a-zA-Z0-9\-_]+$")


def generate_short_uid() -> str:
    """Generate a random 14 character identifier starting with a letter."""
    uid = uuid.uuid4().hex[:SHORT_UID_LENGTH]
    if not uid[0].isalpha():
        uid = random.choice(_HEX_LETTERS) + uid[1:]
    return uid


def is_valid_short_uid(uid: str) -> bool:
    """Check that ``uid`` is non-empty, at most 40 chars and URL safe."""
    if not uid or len(uid) > MAX_UID_LENGTH:
        return False
    return _VALID_UID_PATTERN.match(uid) is not None


async def generate_unique_uid(
    exists: Callable[[str], Awaitable[bool]],
    *,
    error: Type[Exception],
    attempts: int = 3,
) -> str:
    """Generate a uid that ``exists`` reports as unused.

    Args:
        exists: Async predicate returning True when the candidate is taken
        error: Exception class raised once every attempt collided
        attempts: Maximum number of candidates to try

    Returns:
        The first unused candidate

    Raises:
        error: When all ``attempts`` candidates are already in use
    """
    for attempt in range(1, attempts + 1):
        candidate = generate_short_uid()
        if not await exists(candidate):
            return candidate
        logger.warning(f"Generated uid {candidate} already in use (attempt {attempt}/{attempts})")

    raise error()
