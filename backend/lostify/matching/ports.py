"""Matching ports and value types.

The matcher works on plain `PostRecord` values and reads them through the
`PostRepository` port, so it can be driven by the database adapter in
production and by in-memory lists in tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, List, Optional


class PostType(str, Enum):
    """Kind of report. Matching always pairs a post with the other kind."""
    LOST = "lost"
    FOUND = "found"

    @classmethod
    def opposite_of(cls, value: str) -> "PostType":
        """Return the counterpart type (anything that is not 'lost' pairs with 'lost')."""
        return cls.FOUND if value == cls.LOST else cls.LOST


class PostStatus(str, Enum):
    """Lifecycle state of a post. Only ACTIVE posts are matched."""
    ACTIVE = "active"
    RESOLVED = "resolved"
    FLAGGED = "flagged"


@dataclass(frozen=True)
class PostRecord:
    """Read-only view of a post as seen by the matcher.

    Attributes:
        id: Post identifier
        type: "lost" or "found"
        title: Item title
        description: Free-text description (may be empty)
        category: Category label, compared exactly
        location: Where the item was lost or found
        date: Reported date of loss/find (not scored)
        contact_info: Phone number shown to the other party (not scored)
        owner: Identifier of the authoring user
        status: Post status ("active", "resolved", "flagged")
        origin: Object the record was built from, kept for serialization
    """
    id: str
    type: str
    title: str
    description: str
    category: str
    location: str
    owner: str
    status: str = PostStatus.ACTIVE.value
    date: Optional[date] = None
    contact_info: str = ""
    origin: Any = field(default=None, compare=False, repr=False)

    @property
    def is_active(self) -> bool:
        return self.status == PostStatus.ACTIVE


@dataclass(frozen=True)
class Match:
    """A computed pairing of one of the requester's posts with a candidate.

    Attributes:
        source_post: The requester's post
        candidate_post: Opposite-type post owned by someone else
        score: Weighted similarity (0.0-1.0)
        score_percentage: round(score * 100), half-up
    """
    source_post: PostRecord
    candidate_post: PostRecord
    score: float
    score_percentage: int


class PostRepository(ABC):
    """Port for reading the posts the matcher needs.

    Implementations return raw collections in any order and any status;
    filtering is the matcher's job.
    """

    @abstractmethod
    def list_posts_by_user(self, user_id: Any) -> List[PostRecord]:
        """Return every post owned by `user_id`."""

    @abstractmethod
    def list_all_posts(self) -> List[PostRecord]:
        """Return every post in the system."""


class MatcherError(Exception):
    """Exception raised when matches cannot be computed."""
    pass
