"""
RequestContext - Per-request logging context.

One instance lives in the dishka REQUEST scope. The correlation id comes from
the middleware, the user id is bound once the bearer token is resolved.
Handlers log through `ctx.get_logger(__name__)` so every record carries both.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RequestContext:
    correlation_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    user_id: Optional[str] = None

    def bind_user(self, user_id: str) -> None:
        self.user_id = user_id

    def get_logger(self, name: str) -> logging.LoggerAdapter:
        return logging.LoggerAdapter(
            logging.getLogger(name),
            {"correlation_id": self.correlation_id, "user": self.user_id or "-"},
        )
