"""Vote schemas.

Votes have no surrogate id; ``(chat_id, message_id)`` is the key.
"""

from typing import Literal, Optional

from .base import EntityModel, PartialModel

VoteType = Literal["up", "down"]


class Vote(EntityModel):
    chat_id: str
    message_id: str
    is_upvoted: bool


class VoteCreate(PartialModel):
    chat_id: Optional[str] = None
    message_id: Optional[str] = None
    is_upvoted: Optional[bool] = None
