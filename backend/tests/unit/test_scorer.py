"""Unit tests for the weighted post scorer

Tests cover:
- Exact duplicate, category-only mismatch and no-overlap pairs
- Case handling per field
- Missing text fields
- Percentage rounding
- Weight validation
"""

import pytest

from lostify.matching.ports import PostRecord
from lostify.matching.scorer import PostScorer, to_percentage


def record(**fields) -> PostRecord:
    values = {
        "id": "p1",
        "type": "lost",
        "title": "Black Wallet",
        "description": "lost near gym",
        "category": "Wallets",
        "location": "Gym",
        "owner": "u1",
    }
    values.update(fields)
    return PostRecord(**values)


class TestPostScorer:
    """Test PostScorer.score"""

    def test_exact_duplicate_scores_one(self):
        source = record()
        candidate = record(id="p2", type="found", owner="u2")

        result = PostScorer().score(source, candidate)

        assert result.score == 1.0
        assert result.percentage == 100

    def test_category_mismatch_only(self):
        """0.4 * 1 + 0.3 * 1 + 0.2 * 0 + 0.1 * 1"""
        source = record()
        candidate = record(id="p2", type="found", owner="u2", category="Accessories")

        result = PostScorer().score(source, candidate)

        assert result.score == pytest.approx(0.8)
        assert result.percentage == 80
        assert result.features["category"] == 0.0

    def test_no_overlap_scores_zero(self):
        source = record(title="Keys", description="left at desk", category="Keys", location="Gym")
        candidate = record(
            id="p2", type="found", owner="u2",
            title="Phone", description="dropped in bus", category="Electronics", location="Library",
        )

        result = PostScorer().score(source, candidate)

        assert result.score == pytest.approx(0.0)
        assert result.percentage == 0

    def test_text_fields_compared_case_insensitively(self):
        source = record(title="BLACK WALLET", location="GYM")
        candidate = record(id="p2", type="found", owner="u2", title="black wallet", location="gym")

        result = PostScorer().score(source, candidate)

        assert result.features["title"] == 1.0
        assert result.features["location"] == 1.0

    def test_category_compared_case_sensitively(self):
        source = record(category="Wallets")
        candidate = record(id="p2", type="found", owner="u2", category="wallets")

        result = PostScorer().score(source, candidate)

        assert result.features["category"] == 0.0

    def test_missing_descriptions_are_empty_strings(self):
        source = record(description=None)
        candidate = record(id="p2", type="found", owner="u2", description=None)

        result = PostScorer().score(source, candidate)

        assert result.features["description"] == 1.0
        assert result.score == 1.0

    def test_score_is_symmetric(self):
        source = record(title="Blue Umbrella", description="left in canteen")
        candidate = record(
            id="p2", type="found", owner="u2",
            title="Umbrella", description="found in the canteen", location="Canteen",
        )
        scorer = PostScorer()

        assert scorer.score(source, candidate).score == scorer.score(candidate, source).score

    def test_features_reported(self):
        result = PostScorer().score(record(), record(id="p2", type="found", owner="u2"))

        assert set(result.features) == {"title", "description", "category", "location"}


class TestToPercentage:
    """Half-up rounding of score * 100"""

    @pytest.mark.parametrize("score,expected", [
        (0.0, 0),
        (0.3, 30),
        (0.125, 13),
        (0.8, 80),
        (0.994, 99),
        (1.0, 100),
    ])
    def test_rounding(self, score, expected):
        assert to_percentage(score) == expected


class TestWeights:
    """Constructor validation"""

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            PostScorer(title_weight=-0.1, description_weight=0.6)

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ValueError):
            PostScorer(title_weight=0.5)

    def test_custom_weights(self):
        scorer = PostScorer(
            title_weight=1.0, description_weight=0.0, category_weight=0.0, location_weight=0.0,
        )
        source = record()
        candidate = record(id="p2", type="found", owner="u2", description="x", category="Other", location="x")

        assert scorer.score(source, candidate).score == 1.0
