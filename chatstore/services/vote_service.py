"""Vote queries."""

from typing import List

from ..database import Database
from ..exceptions import ValidationError
from ..schemas.vote import Vote, VoteType
from .operations import query_operation

_VOTE_TYPES = ("up", "down")


@query_operation("vote message in database")
def vote_message(db: Database, chat_id: str, message_id: str, type: VoteType) -> Vote:
    """Record an up or down vote, replacing any earlier vote on the message."""
    if type not in _VOTE_TYPES:
        raise ValidationError(f"Vote type must be one of {_VOTE_TYPES}", field="type")
    return db.votes.create(
        {"chat_id": chat_id, "message_id": message_id, "is_upvoted": type == "up"}
    )


@query_operation("get votes by chat id from database")
def get_votes_by_chat_id(db: Database, id: str) -> List[Vote]:
    return db.votes.find_by_chat_id(id)
