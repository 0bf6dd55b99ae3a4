"""Matching engine: pairs lost posts with found posts by weighted text similarity.

The engine is a pure function of its inputs. `PostMatcher` reads posts through
a `PostRepository` and recomputes every match on each call.
"""

from .matcher import MIN_MATCH_SCORE, PostMatcher, compute_matches
from .ports import Match, MatcherError, PostRecord, PostRepository, PostStatus, PostType
from .scorer import MatchScore, PostScorer, to_percentage
from .similarity import compare_two_strings

__all__ = [
    "MIN_MATCH_SCORE",
    "PostMatcher",
    "compute_matches",
    "Match",
    "MatcherError",
    "PostRecord",
    "PostRepository",
    "PostStatus",
    "PostType",
    "MatchScore",
    "PostScorer",
    "to_percentage",
    "compare_two_strings",
]
