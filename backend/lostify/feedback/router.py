"""Feedback endpoints.

Anyone can submit feedback; listing, triage and deletion are ADMIN only.
"""

import logging
from datetime import datetime, timezone
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..auth.dependencies import CurrentAdmin
from ..database import get_db
from ..models.feedback import Feedback
from ..posts.schemas import MessageResponse
from .schemas import (
    FeedbackCreate,
    FeedbackResponse,
    FeedbackStatusUpdate,
    FeedbackSubmitted,
    PendingCount,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/feedback", tags=["Feedback"])


def _get_feedback_or_404(db: Session, feedback_id: UUID) -> Feedback:
    feedback = db.query(Feedback).filter(Feedback.id == feedback_id).first()
    if not feedback:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Feedback not found")
    return feedback


@router.post("", response_model=FeedbackSubmitted, status_code=status.HTTP_201_CREATED)
def submit_feedback(data: FeedbackCreate, db: Session = Depends(get_db)):
    """Store a contact form submission as pending."""
    feedback = Feedback(
        name=data.name,
        email=data.email,
        subject=(data.subject or "").strip() or "General Message",
        message=data.message,
        status="pending",
    )
    db.add(feedback)
    db.commit()
    db.refresh(feedback)

    logger.info(f"Feedback received: {feedback.subject}")
    return FeedbackSubmitted(message="Feedback submitted successfully. Thank you!", id=feedback.id)


@router.get("", response_model=List[FeedbackResponse])
def list_feedback(admin: CurrentAdmin, db: Session = Depends(get_db)):
    """All feedback, newest first (ADMIN only)."""
    return db.query(Feedback).order_by(Feedback.created_at.desc()).all()


@router.get("/count/pending", response_model=PendingCount)
def count_pending_feedback(admin: CurrentAdmin, db: Session = Depends(get_db)):
    """Number of feedback items still pending (ADMIN only)."""
    count = db.query(Feedback).filter(Feedback.status == "pending").count()
    return PendingCount(count=count)


@router.put("/{feedback_id}", response_model=FeedbackResponse)
def update_feedback_status(
    feedback_id: UUID,
    data: FeedbackStatusUpdate,
    admin: CurrentAdmin,
    db: Session = Depends(get_db),
):
    """Move feedback between pending, reviewed and resolved (ADMIN only).

    Resolving records who resolved it and when; reopening clears both.

    Raises:
        HTTPException 404: Feedback not found
    """
    feedback = _get_feedback_or_404(db, feedback_id)

    if data.status == "resolved" and feedback.status != "resolved":
        feedback.resolved_at = datetime.now(timezone.utc)
        feedback.resolved_by = admin.username
    elif data.status != "resolved":
        feedback.resolved_at = None
        feedback.resolved_by = None

    feedback.status = data.status
    db.commit()
    db.refresh(feedback)

    logger.info(f"Feedback {feedback.id} marked {feedback.status}", extra={"user_id": admin.id})
    return feedback


@router.delete("/{feedback_id}", response_model=MessageResponse)
def delete_feedback(
    feedback_id: UUID,
    admin: CurrentAdmin,
    db: Session = Depends(get_db),
):
    """Delete a feedback item (ADMIN only).

    Raises:
        HTTPException 404: Feedback not found
    """
    feedback = _get_feedback_or_404(db, feedback_id)
    db.delete(feedback)
    db.commit()
    return MessageResponse(message="Feedback deleted successfully")
