"""Post queries: filtered listing, sorting and CSV export."""

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy import and_, case, func, or_
from sqlalchemy.orm import Query, Session, joinedload

from ..models.post import Post
from ..models.user import User

SORT_OPTIONS = ("newest", "oldest", "updated", "resolved")

CSV_COLUMNS = [
    "ID", "Title", "Description", "Type", "Category", "Location", "Date",
    "Contact", "Status", "User", "Created At", "Admin Note",
]


@dataclass
class PostFilters:
    """Listing filters. Unset fields do not restrict the result.

    Attributes:
        type: 'lost' or 'found' ('all' is ignored)
        category: Case-insensitive exact category ('all' is ignored)
        location: Case-insensitive substring of the location
        search: Case-insensitive substring of title or description
        status: Post status ('all' disables the filter)
        date_from: Earliest item date (inclusive)
        date_to: Latest item date (inclusive)
        user: Substring of the owner's username or email
        has_image: Only posts with (True) or without (False) an image
        sort_by: One of SORT_OPTIONS
    """
    type: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    search: Optional[str] = None
    status: Optional[str] = "active"
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    user: Optional[str] = None
    has_image: Optional[bool] = None
    sort_by: str = "newest"


def _contains(value: str) -> str:
    """LIKE pattern matching `value` as a literal substring (escape char is a backslash)."""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def apply_filters(query: Query, filters: PostFilters) -> Query:
    """Apply listing filters to a Post query."""
    if filters.type and filters.type.lower() != "all":
        query = query.filter(Post.type == filters.type.lower())

    if filters.category and filters.category.lower() != "all":
        query = query.filter(func.lower(Post.category) == filters.category.lower())

    if filters.location:
        query = query.filter(Post.location.ilike(_contains(filters.location), escape="\\"))

    if filters.search:
        pattern = _contains(filters.search)
        query = query.filter(or_(
            Post.title.ilike(pattern, escape="\\"),
            Post.description.ilike(pattern, escape="\\"),
        ))

    if filters.status and filters.status.lower() != "all":
        query = query.filter(Post.status == filters.status.lower())

    if filters.date_from:
        query = query.filter(Post.date >= filters.date_from)
    if filters.date_to:
        query = query.filter(Post.date <= filters.date_to)

    if filters.user:
        pattern = _contains(filters.user)
        query = query.join(Post.owner).filter(
            or_(User.username.ilike(pattern, escape="\\"), User.email.ilike(pattern, escape="\\"))
        )

    if filters.has_image is True:
        query = query.filter(and_(Post.image_url.isnot(None), Post.image_url != ""))
    elif filters.has_image is False:
        query = query.filter(or_(Post.image_url.is_(None), Post.image_url == ""))

    return query


def apply_sort(query: Query, sort_by: str) -> Query:
    """Order a Post query. Unknown values fall back to newest first."""
    if sort_by == "oldest":
        return query.order_by(Post.created_at.asc())
    if sort_by == "updated":
        return query.order_by(Post.updated_at.desc())
    if sort_by == "resolved":
        resolved_first = case((Post.status == "resolved", 0), else_=1)
        return query.order_by(resolved_first, Post.created_at.desc())
    return query.order_by(Post.created_at.desc())


def list_posts(db: Session, filters: PostFilters) -> List[Post]:
    query = db.query(Post).options(joinedload(Post.owner))
    query = apply_filters(query, filters)
    query = apply_sort(query, filters.sort_by)
    return query.all()


def list_user_posts(db: Session, user_id) -> List[Post]:
    return (
        db.query(Post)
        .options(joinedload(Post.owner))
        .filter(Post.owner_id == user_id)
        .order_by(Post.created_at.desc())
        .all()
    )


def export_posts_csv(posts: Iterable[Post]) -> str:
    """Render posts as CSV with a header row.

    Returns:
        CSV document as a string
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_COLUMNS)

    for post in posts:
        writer.writerow([
            str(post.id),
            post.title,
            post.description or "",
            post.type,
            post.category,
            post.location,
            post.date.isoformat() if post.date else "",
            post.contact_info,
            post.status,
            post.username or "",
            post.created_at.isoformat() if post.created_at else "",
            post.admin_notes or "",
        ])

    return buffer.getvalue()
