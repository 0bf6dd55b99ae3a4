"""Response schemas for the matching endpoint."""

from pydantic import BaseModel, Field

from ..posts.schemas import PostResponse


class MatchResponse(BaseModel):
    """One candidate pairing between the requester's post and another user's post."""
    source_post: PostResponse = Field(..., description="The requester's post")
    candidate_post: PostResponse = Field(..., description="Opposite-type post owned by someone else")
    score: float = Field(..., ge=0.0, le=1.0)
    score_percentage: int = Field(..., ge=0, le=100)
