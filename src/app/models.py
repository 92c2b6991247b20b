from typing import List, NamedTuple

from pydantic import BaseModel


class Candidate(NamedTuple):
    """
    A word matched during a single completion query and its corpus count.
    """
    word: str
    count: int


class MatchesResponse(BaseModel):
    """
    Body of a successful /autocomplete response.
    """
    matches: List[str]


class MessageResponse(BaseModel):
    """
    Body of every error response.
    """
    message: str


UNSUPPORTED_REQUEST = MessageResponse(message="Unsupported request")
INTERNAL_ERROR = MessageResponse(message="Internal service error")
