"""Analytics endpoint for the admin dashboard."""

from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from ..auth.dependencies import CurrentAdmin
from ..database import get_db
from ..models.feedback import Feedback
from ..models.post import Post
from ..models.user import User

router = APIRouter(prefix="/admin/analytics", tags=["Analytics"])


class AnalyticsResponse(BaseModel):
    total_users: int
    active_users: int
    total_posts: int
    lost_posts: int
    found_posts: int
    active_posts: int
    resolved_posts: int
    flagged_posts: int
    total_feedback: int
    pending_feedback: int
    posts_by_category: Dict[str, int]


def _count_by(db: Session, column) -> Dict[str, int]:
    return {key: count for key, count in db.query(column, func.count()).group_by(column).all()}


@router.get("", response_model=AnalyticsResponse)
def get_analytics(admin: CurrentAdmin, db: Session = Depends(get_db)):
    """Counts of users, posts and feedback (ADMIN only)."""
    users_by_status = _count_by(db, User.status)
    posts_by_type = _count_by(db, Post.type)
    posts_by_status = _count_by(db, Post.status)
    feedback_by_status = _count_by(db, Feedback.status)

    return AnalyticsResponse(
        total_users=sum(users_by_status.values()),
        active_users=users_by_status.get("ACTIVE", 0),
        total_posts=sum(posts_by_type.values()),
        lost_posts=posts_by_type.get("lost", 0),
        found_posts=posts_by_type.get("found", 0),
        active_posts=posts_by_status.get("active", 0),
        resolved_posts=posts_by_status.get("resolved", 0),
        flagged_posts=db.query(Post).filter(or_(Post.flagged.is_(True), Post.status == "flagged")).count(),
        total_feedback=sum(feedback_by_status.values()),
        pending_feedback=feedback_by_status.get("pending", 0),
        posts_by_category=_count_by(db, Post.category),
    )
