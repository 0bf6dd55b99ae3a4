"""Prometheus metrics for Lostify."""

from prometheus_client import Counter, Histogram

posts_created_total = Counter(
    "lostify_posts_created_total",
    "Total number of posts created",
    ["type"]  # type: lost|found
)

match_requests_total = Counter(
    "lostify_match_requests_total",
    "Total number of match computations served"
)

matches_returned = Histogram(
    "lostify_matches_returned",
    "Number of matches returned per request",
    buckets=[0, 1, 2, 5, 10, 25, 50, 100]
)

match_score_histogram = Histogram(
    "lostify_match_score",
    "Score distribution of reported matches",
    buckets=[0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]
)
