"""Pairwise post scoring.

    score = 0.4 * S_title + 0.3 * S_desc + 0.2 * S_cat + 0.1 * S_loc

- S_title, S_desc, S_loc: bigram similarity of the lower-cased fields
- S_cat: 1.0 when categories are exactly equal (case-sensitive), else 0.0

The weights sum to 1.0, so the score stays within [0.0, 1.0].
"""

import math
from dataclasses import dataclass
from typing import Dict

from .ports import PostRecord
from .similarity import compare_two_strings

TITLE_WEIGHT = 0.4
DESCRIPTION_WEIGHT = 0.3
CATEGORY_WEIGHT = 0.2
LOCATION_WEIGHT = 0.1


def to_percentage(score: float) -> int:
    """Round score * 100 half-up (0.125 -> 13, not banker's rounding)."""
    return int(math.floor(score * 100 + 0.5))


@dataclass(frozen=True)
class MatchScore:
    """Result of scoring one post pair.

    Attributes:
        score: Weighted similarity (0.0-1.0)
        percentage: Rounded integer percentage
        features: Per-field component scores, for debugging
    """
    score: float
    percentage: int
    features: Dict[str, float]


class PostScorer:
    """Calculate the weighted similarity between two posts.

    The scorer is pure: it holds only its weights and never mutates the posts.
    Missing text fields are treated as empty strings.
    """

    def __init__(
        self,
        title_weight: float = TITLE_WEIGHT,
        description_weight: float = DESCRIPTION_WEIGHT,
        category_weight: float = CATEGORY_WEIGHT,
        location_weight: float = LOCATION_WEIGHT,
    ):
        """Initialize scorer with field weights.

        Raises:
            ValueError: If a weight is negative or the weights do not sum to 1.0
        """
        weights = (title_weight, description_weight, category_weight, location_weight)
        if any(w < 0 for w in weights):
            raise ValueError("Scoring weights must be non-negative")
        if not math.isclose(sum(weights), 1.0):
            raise ValueError(f"Scoring weights must sum to 1.0, got {sum(weights)}")

        self.title_weight = title_weight
        self.description_weight = description_weight
        self.category_weight = category_weight
        self.location_weight = location_weight

    def score(self, source: PostRecord, candidate: PostRecord) -> MatchScore:
        """Score `candidate` against `source`.

        Args:
            source: The requester's post
            candidate: Opposite-type post to compare against

        Returns:
            MatchScore with overall score, percentage and component features
        """
        s_title = compare_two_strings(_lower(source.title), _lower(candidate.title))
        s_desc = compare_two_strings(_lower(source.description), _lower(candidate.description))
        s_cat = 1.0 if source.category == candidate.category else 0.0
        s_loc = compare_two_strings(_lower(source.location), _lower(candidate.location))

        # fsum keeps identical posts at exactly 1.0 (plain addition gives 0.9999999999999999)
        overall = math.fsum((
            self.title_weight * s_title,
            self.description_weight * s_desc,
            self.category_weight * s_cat,
            self.location_weight * s_loc,
        ))
        overall = max(0.0, min(1.0, overall))

        return MatchScore(
            score=overall,
            percentage=to_percentage(overall),
            features={
                "title": s_title,
                "description": s_desc,
                "category": s_cat,
                "location": s_loc,
            },
        )


def _lower(value) -> str:
    return (value or "").lower()
