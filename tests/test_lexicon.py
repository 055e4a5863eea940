"""Tests for the trait catalog and lexicon."""

import json

import pytest

from bigfive.errors import LexiconError
from bigfive.traits.catalog import TRAIT_IDS, get_trait_catalog
from bigfive.traits.lexicon import Lexicon, get_lexicon


class TestTraitCatalog:
    """Tests for TraitCatalog."""

    def test_five_traits(self):
        """Test the catalog holds the five categories in order."""
        catalog = get_trait_catalog()
        assert catalog.get_trait_ids() == list(TRAIT_IDS)

    def test_get_trait(self):
        """Test looking up a trait."""
        trait = get_trait_catalog().get_trait("N")
        assert trait is not None
        assert trait.name == "Neuroticism"

    def test_get_name_fallback(self):
        """Test unknown IDs fall back to the ID itself."""
        assert get_trait_catalog().get_name("X") == "X"


class TestLexicon:
    """Tests for Lexicon."""

    def test_from_dict(self, lexicon):
        """Test building a lexicon from data."""
        assert list(lexicon) == list(TRAIT_IDS)
        assert lexicon["O"]["capital"] == -1.0
        assert len(lexicon["N"]) == 4

    def test_preserves_order(self, lexicon):
        """Test term order follows the source data."""
        assert list(lexicon["N"]) == ["hate", "worried", "so tired", "tired"]

    def test_missing_categories_empty(self):
        """Test categories absent from the data are empty."""
        lexicon = Lexicon.from_dict({"O": {"art": 0.5}})
        assert dict(lexicon["C"]) == {}
        assert len(lexicon) == 5

    def test_read_only(self, lexicon):
        """Test categories cannot be mutated."""
        with pytest.raises(TypeError):
            lexicon["O"]["capital"] = 5.0

    def test_source_data_copied(self, lexicon_data):
        """Test later changes to the source dict do not leak in."""
        lexicon = Lexicon.from_dict(lexicon_data)
        lexicon_data["O"]["capital"] = 99.0
        lexicon_data["O"]["extra"] = 1.0
        assert lexicon["O"]["capital"] == -1.0
        assert "extra" not in lexicon["O"]

    def test_intercept(self):
        """Test intercepts are read from the reserved key."""
        lexicon = Lexicon.from_dict({"O": {"_intercept": 2.5, "art": 0.5}})
        assert lexicon.intercept("O") == 2.5
        assert lexicon.intercept("C") == 0.0
        assert "_intercept" not in lexicon["O"]

    def test_unknown_category(self):
        """Test unknown categories are rejected."""
        with pytest.raises(LexiconError):
            Lexicon.from_dict({"X": {"art": 0.5}})

    def test_bad_weight(self):
        """Test non-numeric weights are rejected."""
        with pytest.raises(LexiconError):
            Lexicon.from_dict({"O": {"art": "high"}})

    @pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_weight(self, weight):
        """Test NaN and infinite weights are rejected."""
        with pytest.raises(LexiconError):
            Lexicon.from_dict({"O": {"note": weight}})

    def test_non_finite_intercept(self):
        """Test a NaN intercept is rejected."""
        with pytest.raises(LexiconError):
            Lexicon.from_dict({"O": {"_intercept": float("nan")}})

    def test_nan_in_file(self, tmp_path):
        """Test a NaN literal in a lexicon file is rejected."""
        path = tmp_path / "nan.json"
        path.write_text('{"O": {"note": NaN}}', encoding="utf-8")
        with pytest.raises(LexiconError):
            Lexicon.load_from_file(path)

    def test_not_a_mapping(self):
        """Test data of the wrong shape is rejected."""
        with pytest.raises(LexiconError):
            Lexicon.from_dict(["O", "C"])

    def test_empty_term(self):
        """Test blank terms are rejected."""
        with pytest.raises(LexiconError):
            Lexicon({"O": {"  ": 1.0}})

    def test_stats(self, lexicon):
        """Test per-category statistics."""
        stats = lexicon.stats()
        assert stats["O"].terms == 3
        assert stats["O"].ngrams == 1
        assert stats["O"].min_weight == -1.0
        assert stats["O"].max_weight == 0.4
        assert stats["O"].intercept == 0.0

    def test_stats_empty_category(self):
        """Test statistics for an empty category."""
        stats = Lexicon.from_dict({}).stats()
        assert stats["E"].terms == 0
        assert stats["E"].min_weight is None


class TestLexiconLoading:
    """Tests for loading lexicon files."""

    def test_load_from_file(self, lexicon_file):
        """Test loading an explicit file."""
        lexicon = Lexicon.load_from_file(lexicon_file)
        assert lexicon["E"]["party"] == 0.8

    def test_load_bundled(self):
        """Test loading the bundled sample lexicon."""
        lexicon = Lexicon.load_from_file()
        assert all(len(lexicon[trait_id]) > 0 for trait_id in TRAIT_IDS)

    def test_load_configured_path(self, lexicon_file, monkeypatch):
        """Test the default path comes from settings."""
        monkeypatch.setenv("BIGFIVE_LEXICON_PATH", str(lexicon_file))
        lexicon = get_lexicon()
        assert dict(lexicon["O"]) == {"capital": -1.0, "note": -0.5, "new ideas": 0.4}

    def test_get_lexicon_cached(self):
        """Test the default lexicon is loaded once."""
        assert get_lexicon() is get_lexicon()

    def test_missing_file(self, tmp_path):
        """Test a missing file raises LexiconError."""
        with pytest.raises(LexiconError):
            Lexicon.load_from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test a corrupt file raises LexiconError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(LexiconError):
            Lexicon.load_from_file(path)

    def test_invalid_shape(self, tmp_path):
        """Test valid JSON with the wrong shape raises LexiconError."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"O": ["art"]}), encoding="utf-8")
        with pytest.raises(LexiconError):
            Lexicon.load_from_file(path)
