"""
Per-run collector of advisory warnings.
"""

import logging
from typing import Iterator

logger = logging.getLogger(__name__)


class WarningsLog:
    """
    Ordered, append-only list of human-readable advisory messages.

    One instance belongs to one estimate run and is handed to each stage
    that may warn. There is no way to remove or reorder entries.
    """

    def __init__(self) -> None:
        self._messages: list[str] = []

    def warn(self, message: str) -> None:
        """Append an advisory message."""
        logger.info("advisory: %s", message)
        self._messages.append(message)

    def as_list(self) -> list[str]:
        """Snapshot of the messages collected so far."""
        return list(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._messages))

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, message: object) -> bool:
        return message in self._messages
