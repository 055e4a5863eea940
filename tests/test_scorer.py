"""Tests for category scoring and rounding."""

import json
import logging
import math

import pytest

from bigfive.traits.models import Match
from bigfive.traits.scorer import round_half_away, score_matches, term_value

MATCHES = [
    Match(term="capital", count=2, weight=-1.0),
    Match(term="note", count=3, weight=-0.5),
]


class TestRoundHalfAway:
    """Tests for round_half_away."""

    def test_half_up(self):
        """Test halves round away from zero."""
        assert round_half_away(0.125, 2) == 0.13
        assert round_half_away(2.5, 0) == 3.0

    def test_half_negative(self):
        """Test negative halves round away from zero."""
        assert round_half_away(-0.125, 2) == -0.13
        assert round_half_away(-2.5, 0) == -3.0

    def test_differs_from_builtin(self):
        """Test the builtin's banker's rounding is not used."""
        assert round(0.125, 2) == 0.12
        assert round_half_away(0.125, 2) == 0.13

    def test_large_values(self):
        """Test large magnitudes do not overflow the decimal context."""
        assert round_half_away(1e20, 9) == 1e20

    def test_non_finite(self):
        """Test infinities pass through."""
        assert round_half_away(float("inf"), 3) == float("inf")

    def test_no_negative_zero(self):
        """Test small negatives rounding to zero lose their sign."""
        result = round_half_away(-0.0001, 2)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_score_no_negative_zero(self):
        """Test a tiny negative score serializes as 0.0."""
        score = score_matches([Match(term="note", count=1, weight=-0.0001)], places=2)
        assert json.dumps(score) == "0.0"


class TestScoreMatches:
    """Tests for score_matches."""

    def test_binary(self):
        """Test binary sums each distinct term once."""
        assert score_matches(MATCHES, "binary", wordcount=9) == -1.5

    def test_frequency(self):
        """Test frequency weights each term by its rate."""
        score = score_matches(MATCHES, "frequency", wordcount=9, places=4)
        assert score == -0.3889

    def test_intercept(self):
        """Test the intercept is added to weight-based scores."""
        assert score_matches(MATCHES, "binary", intercept=2.0) == 0.5
        assert score_matches([], "binary", intercept=2.0) == 2.0

    def test_frequency_zero_wordcount(self):
        """Test a zero word count collapses to the intercept."""
        assert score_matches(MATCHES, "frequency", wordcount=0, intercept=1.25) == 1.25

    def test_percent(self):
        """Test percent reports matched share of distinct terms."""
        assert score_matches(MATCHES, "percent", distinct_terms=8) == 0.25

    def test_percent_ignores_intercept(self):
        """Test percent stays in [0, 1] regardless of intercept."""
        assert score_matches(MATCHES, "percent", distinct_terms=2, intercept=5.0) == 1.0

    def test_percent_no_terms(self):
        """Test percent with nothing considered."""
        assert score_matches([], "percent", distinct_terms=0) == 0.0

    def test_unknown_encoding(self, caplog):
        """Test an unknown encoding falls back to binary with a warning."""
        with caplog.at_level(logging.WARNING):
            score = score_matches(MATCHES, "bogus", wordcount=9)
        assert score == -1.5
        assert "bogus" in caplog.text

    def test_empty(self):
        """Test no matches scores zero."""
        assert score_matches([], "binary") == 0.0
        assert score_matches([], "frequency", wordcount=5) == 0.0

    def test_binary_order_independent(self):
        """Test permuting matches leaves the binary score unchanged."""
        assert score_matches(MATCHES, "binary") == score_matches(MATCHES[::-1], "binary")

    def test_frequency_scale_consistent(self):
        """Test doubling counts and word count leaves the score unchanged."""
        doubled = [Match(term=m.term, count=m.count * 2, weight=m.weight) for m in MATCHES]
        assert score_matches(MATCHES, "frequency", wordcount=9) == score_matches(
            doubled, "frequency", wordcount=18
        )

    @pytest.mark.parametrize("places", [0, 1, 3, 6, 9])
    def test_rounding_law(self, places):
        """Test the rounded score is within one unit of the raw sum."""
        raw = (2 / 9) * -1.0 + (3 / 9) * -0.5
        score = score_matches(MATCHES, "frequency", wordcount=9, places=places)
        assert abs(score - raw) <= 10 ** -places


class TestTermValue:
    """Tests for term_value."""

    def test_binary(self):
        """Test the binary contribution is the weight."""
        assert term_value(MATCHES[0], "binary", 9) == -1.0

    def test_frequency(self):
        """Test the frequency contribution."""
        assert term_value(MATCHES[1], "frequency", 6) == -0.25

    def test_frequency_zero_wordcount(self):
        """Test the division guard."""
        assert term_value(MATCHES[1], "frequency", 0) == 0.0
