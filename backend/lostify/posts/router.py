"""Post endpoints: listing, CRUD and admin moderation."""

import logging
from datetime import date
from typing import List, Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from ..auth.dependencies import CurrentAdmin, CurrentUser
from ..database import get_db
from ..models.post import Post
from ..models.user import User
from ..observability.metrics import posts_created_total
from .schemas import (
    AdminPostResponse,
    AdminPostUpdate,
    MessageResponse,
    PostCreate,
    PostResponse,
    PostUpdate,
)
from .service import PostFilters, export_posts_csv, list_posts, list_user_posts

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])

# Columns that may be cleared by sending null
NULLABLE_FIELDS = {"image_url", "admin_notes"}


def _get_post_or_404(db: Session, post_id: UUID) -> Post:
    post = (
        db.query(Post)
        .options(joinedload(Post.owner))
        .filter(Post.id == post_id)
        .first()
    )
    if not post:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


def _ensure_can_modify(post: Post, user: User, action: str) -> None:
    if post.owner_id != user.id and not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action} this post"
        )


def _apply_update(post: Post, changes: dict) -> None:
    for field, value in changes.items():
        if value is None and field not in NULLABLE_FIELDS:
            continue
        setattr(post, field, value)


@router.get("", response_model=List[PostResponse])
def get_posts(
    db: Session = Depends(get_db),
    post_type: Optional[str] = Query(None, alias="type", description="lost, found or all"),
    category: Optional[str] = Query(None, description="Category (case-insensitive), or all"),
    location: Optional[str] = Query(None, description="Substring of the location"),
    search: Optional[str] = Query(None, description="Substring of title or description"),
    post_status: Optional[str] = Query("active", alias="status", description="active, resolved, flagged or all"),
    date_from: Optional[date] = Query(None),
    date_to: Optional[date] = Query(None),
    user: Optional[str] = Query(None, description="Substring of the owner's username or email"),
    has_image: Optional[bool] = Query(None),
    sort_by: Literal["newest", "oldest", "updated", "resolved"] = Query("newest"),
):
    """List posts with filters. Only active posts are returned unless `status` says otherwise."""
    filters = PostFilters(
        type=post_type,
        category=category,
        location=location,
        search=search,
        status=post_status,
        date_from=date_from,
        date_to=date_to,
        user=user,
        has_image=has_image,
        sort_by=sort_by,
    )
    return list_posts(db, filters)


@router.get("/my-posts", response_model=List[PostResponse])
def get_my_posts(current_user: CurrentUser, db: Session = Depends(get_db)):
    """Return the requester's posts, newest first, whatever their status."""
    return list_user_posts(db, current_user.id)


@router.get("/stats/admin")
def get_post_stats(admin: CurrentAdmin, db: Session = Depends(get_db)):
    """Post counts by status and type (ADMIN only)."""
    by_status = dict(db.query(Post.status, func.count(Post.id)).group_by(Post.status).all())
    by_type = dict(db.query(Post.type, func.count(Post.id)).group_by(Post.type).all())
    return {
        "total_posts": sum(by_status.values()),
        "active_posts": by_status.get("active", 0),
        "resolved_posts": by_status.get("resolved", 0),
        "lost_posts": by_type.get("lost", 0),
        "found_posts": by_type.get("found", 0),
    }


@router.get("/admin/all", response_model=List[AdminPostResponse])
def get_all_posts_admin(admin: CurrentAdmin, db: Session = Depends(get_db)):
    """Every post regardless of status, newest first (ADMIN only)."""
    return list_posts(db, PostFilters(status="all"))


@router.patch("/admin/{post_id}", response_model=AdminPostResponse)
def moderate_post(
    post_id: UUID,
    data: AdminPostUpdate,
    admin: CurrentAdmin,
    db: Session = Depends(get_db),
):
    """Update status, flag and moderation notes of any post (ADMIN only).

    Raises:
        HTTPException 404: Post not found
    """
    post = _get_post_or_404(db, post_id)
    _apply_update(post, data.model_dump(exclude_unset=True))
    db.commit()
    db.refresh(post)

    logger.info(
        f"Post moderated by {admin.username}: status={post.status} flagged={post.flagged}",
        extra={"user_id": admin.id, "post_id": post.id}
    )
    return post


@router.get("/export/csv")
def export_csv(admin: CurrentAdmin, db: Session = Depends(get_db)):
    """Download every post as `lostify-posts.csv` (ADMIN only)."""
    posts = list_posts(db, PostFilters(status="all"))
    return Response(
        content=export_posts_csv(posts),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=lostify-posts.csv"},
    )


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: UUID, db: Session = Depends(get_db)):
    """Fetch a single post.

    Raises:
        HTTPException 404: Post not found
    """
    return _get_post_or_404(db, post_id)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    data: PostCreate,
    current_user: CurrentUser,
    db: Session = Depends(get_db),
):
    """Report a lost or found item. The item date defaults to today."""
    post = Post(
        title=data.title,
        description=data.description or "",
        type=data.type,
        category=data.category,
        location=data.location,
        date=data.date or date.today(),
        contact_info=data.contact_info,
        image_url=data.image_url or None,
        owner_id=current_user.id,
        status="active",
        flagged=False,
    )
    db.add(post)
    db.commit()
    db.refresh(post)

    posts_created_total.labels(type=post.type).inc()
    logger.info(
        f"Post created: {post.type} '{post.title}'",
        extra={"user_id": current_user.id, "post_id": post.id}
    )
    return post


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: UUID,
    data: PostUpdate,
    current_user: CurrentUser,
    db: Session = Depends(get_db),
):
    """Edit a post (owner or ADMIN).

    Raises:
        HTTPException 403: Requester neither owns the post nor is an admin
        HTTPException 404: Post not found
    """
    post = _get_post_or_404(db, post_id)
    _ensure_can_modify(post, current_user, "update")

    changes = data.model_dump(exclude_unset=True)
    if "status" in changes and post.status == "flagged" and not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Flagged posts can only be reactivated by an admin"
        )

    _apply_update(post, changes)
    db.commit()
    db.refresh(post)
    return post


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: UUID,
    current_user: CurrentUser,
    db: Session = Depends(get_db),
):
    """Delete a post (owner or ADMIN).

    Raises:
        HTTPException 403: Requester neither owns the post nor is an admin
        HTTPException 404: Post not found
    """
    post = _get_post_or_404(db, post_id)
    _ensure_can_modify(post, current_user, "delete")

    db.delete(post)
    db.commit()

    logger.info("Post deleted", extra={"user_id": current_user.id, "post_id": post_id})
    return MessageResponse(message="Post deleted successfully")
