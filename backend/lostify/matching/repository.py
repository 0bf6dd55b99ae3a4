"""SQLAlchemy adapter for the PostRepository port."""

from typing import Any, List

from sqlalchemy.orm import Session, joinedload

from ..models.post import Post
from .ports import PostRecord, PostRepository


def post_to_record(post: Post) -> PostRecord:
    """Convert an ORM post into a matcher record.

    Text fields that are NULL become empty strings so the scorer never sees
    None. The ORM object is kept as `origin` for response serialization.
    """
    return PostRecord(
        id=str(post.id),
        type=post.type,
        title=post.title or "",
        description=post.description or "",
        category=post.category or "",
        location=post.location or "",
        owner=str(post.owner_id),
        status=post.status,
        date=post.date,
        contact_info=post.contact_info or "",
        origin=post,
    )


class SqlAlchemyPostRepository(PostRepository):
    """Read posts from the relational store, newest first."""

    def __init__(self, db: Session):
        self.db = db

    def list_posts_by_user(self, user_id: Any) -> List[PostRecord]:
        posts = (
            self.db.query(Post)
            .options(joinedload(Post.owner))
            .filter(Post.owner_id == user_id)
            .order_by(Post.created_at.desc())
            .all()
        )
        return [post_to_record(p) for p in posts]

    def list_all_posts(self) -> List[PostRecord]:
        posts = (
            self.db.query(Post)
            .options(joinedload(Post.owner))
            .order_by(Post.created_at.desc())
            .all()
        )
        return [post_to_record(p) for p in posts]
