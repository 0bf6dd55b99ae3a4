"""Matching endpoint: candidate matches for the requester's active posts."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..auth.dependencies import CurrentUser
from ..config import Settings, get_settings
from ..database import get_db
from ..observability.metrics import match_requests_total, match_score_histogram, matches_returned
from ..posts.schemas import PostResponse
from .matcher import PostMatcher
from .ports import MatcherError
from .repository import SqlAlchemyPostRepository
from .schemas import MatchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Matching"])


@router.get("/my-matches", response_model=List[MatchResponse])
def get_my_matches(
    current_user: CurrentUser,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Return ranked matches between the requester's active posts and other users' posts.

    Matches are recomputed on every call, sorted by score descending.

    Raises:
        HTTPException 500: Posts could not be loaded for matching
    """
    matcher = PostMatcher(
        SqlAlchemyPostRepository(db),
        threshold=settings.MATCH_THRESHOLD,
    )

    try:
        matches = matcher.matches_for_user(current_user.id)
    except MatcherError as e:
        logger.error(f"Match computation failed: {e}", extra={"user_id": current_user.id})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute matches"
        )

    match_requests_total.inc()
    matches_returned.observe(len(matches))
    for match in matches:
        match_score_histogram.observe(match.score)

    return [
        MatchResponse(
            source_post=PostResponse.model_validate(match.source_post.origin),
            candidate_post=PostResponse.model_validate(match.candidate_post.origin),
            score=match.score,
            score_percentage=match.score_percentage,
        )
        for match in matches
    ]
