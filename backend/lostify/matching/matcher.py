"""Match orchestration: pair a user's active posts with opposite-type candidates.

Pipeline per active user post:
1. Determine the opposite type (lost <-> found)
2. Candidates = active posts of that type not owned by the requester
3. Score every (user post, candidate) pair
4. Keep pairs scoring >= threshold
Then flatten across all user posts and sort by score DESC. Equal scores keep
input order (stable sort), so callers control tie-breaking through the order
of the collections they pass in.
"""

import logging
from typing import Any, Iterable, List, Optional

from .ports import Match, MatcherError, PostRecord, PostRepository, PostType
from .scorer import PostScorer

logger = logging.getLogger(__name__)

MIN_MATCH_SCORE = 0.3


def compute_matches(
    requester_id: Any,
    user_posts: Iterable[PostRecord],
    all_posts: Iterable[PostRecord],
    scorer: Optional[PostScorer] = None,
    threshold: float = MIN_MATCH_SCORE,
) -> List[Match]:
    """Compute the ranked list of candidate matches for one requester.

    Args:
        requester_id: Identifier of the requesting user
        user_posts: Posts owned by the requester (any status)
        all_posts: Every post in the system (any status)
        scorer: Pairwise scorer (defaults to PostScorer())
        threshold: Minimum score to report a pairing (inclusive)

    Returns:
        Matches sorted by score descending; empty when nothing qualifies
    """
    scorer = scorer or PostScorer()
    requester = str(requester_id)
    corpus = list(all_posts)

    matches: List[Match] = []
    for user_post in user_posts:
        if not user_post.is_active:
            continue

        opposite_type = PostType.opposite_of(user_post.type)
        candidates = [
            post for post in corpus
            if post.type == opposite_type
            and post.is_active
            and str(post.owner) != requester
        ]

        for candidate in candidates:
            result = scorer.score(user_post, candidate)
            if result.score >= threshold:
                matches.append(Match(
                    source_post=user_post,
                    candidate_post=candidate,
                    score=result.score,
                    score_percentage=result.percentage,
                ))

    matches.sort(key=lambda m: m.score, reverse=True)
    return matches


class PostMatcher:
    """Compute matches for a user by reading posts through a PostRepository.

    The matcher holds no state between calls; every call is a full recompute
    over the repository's current snapshot.
    """

    def __init__(
        self,
        repository: PostRepository,
        scorer: Optional[PostScorer] = None,
        threshold: float = MIN_MATCH_SCORE,
    ):
        """Initialize matcher.

        Args:
            repository: Source of user posts and the full post corpus
            scorer: Pairwise scorer (defaults to PostScorer())
            threshold: Minimum score to report a pairing (inclusive)
        """
        self.repository = repository
        self.scorer = scorer or PostScorer()
        self.threshold = threshold

    def matches_for_user(self, user_id: Any) -> List[Match]:
        """Return ranked matches across all of the user's active posts.

        Raises:
            MatcherError: If the posts cannot be loaded
        """
        try:
            user_posts = self.repository.list_posts_by_user(user_id)
            all_posts = self.repository.list_all_posts()
        except Exception as e:
            raise MatcherError(f"Failed to load posts for matching: {e}") from e

        matches = compute_matches(
            user_id,
            user_posts,
            all_posts,
            scorer=self.scorer,
            threshold=self.threshold,
        )

        logger.info(
            f"Computed {len(matches)} matches from {len(user_posts)} user posts "
            f"against {len(all_posts)} posts",
            extra={"user_id": user_id, "match_count": len(matches)}
        )
        return matches
