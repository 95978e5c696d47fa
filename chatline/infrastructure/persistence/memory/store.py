"""
InMemoryStore - Process-local tables shared by the in-memory repositories.

Entities are copied on the way in and out so callers never hold a live row.
`transaction()` snapshots every table and restores the snapshot if the block
raises, which gives the same all-or-nothing behaviour as a database
transaction.
"""

import copy
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from chatline.domain.entities import Comment, Conversation, Message, User

logger = logging.getLogger(__name__)


@dataclass
class Tables:
    users: dict[str, User] = field(default_factory=dict)
    conversations: dict[str, Conversation] = field(default_factory=dict)
    # (conversation_id, user_id) in insertion order
    members: list[tuple[str, str]] = field(default_factory=list)
    messages: dict[str, Message] = field(default_factory=dict)
    comments: dict[str, Comment] = field(default_factory=dict)


class InMemoryStore:
    def __init__(self):
        self.tables = Tables()
        self._depth = 0

    @contextmanager
    def transaction(self) -> Iterator[Tables]:
        if self._depth:
            # Nested blocks join the outer transaction
            self._depth += 1
            try:
                yield self.tables
            finally:
                self._depth -= 1
            return

        snapshot = copy.deepcopy(self.tables)
        self._depth = 1
        try:
            yield self.tables
        except BaseException:
            self.tables = snapshot
            logger.warning("In-memory transaction rolled back")
            raise
        finally:
            self._depth = 0

    @staticmethod
    def copy(entity):
        return copy.deepcopy(entity)
