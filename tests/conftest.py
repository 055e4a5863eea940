"""Pytest configuration and fixtures."""

import json
import os
import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Set test environment variables
os.environ["BIGFIVE_LOG_LEVEL"] = "WARNING"
os.environ.pop("BIGFIVE_LEXICON_PATH", None)

LEXICON_DATA = {
    "O": {"capital": -1.0, "note": -0.5, "new ideas": 0.4},
    "C": {"plan": 0.5, "work": 0.25},
    "E": {"party": 0.8, "friends": 0.6, "alone": -0.4},
    "A": {"thank you": 0.7, "thank": 0.3, "hate": -0.6},
    "N": {"hate": 0.5, "worried": 0.9, "so tired": 0.4, "tired": 0.2},
}


@pytest.fixture
def lexicon_data():
    """Raw lexicon data used across tests."""
    return json.loads(json.dumps(LEXICON_DATA))


@pytest.fixture
def lexicon(lexicon_data):
    """Small lexicon with unigrams, n-grams and negative weights."""
    from bigfive.traits.lexicon import Lexicon

    return Lexicon.from_dict(lexicon_data)


@pytest.fixture
def lexicon_file(tmp_path, lexicon_data):
    """The test lexicon written to a JSON file."""
    path = tmp_path / "lexicon.json"
    path.write_text(json.dumps(lexicon_data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clear_caches():
    """Reset cached settings and default lexicon between tests."""
    from bigfive.config import get_settings
    from bigfive.traits.lexicon import get_lexicon

    get_settings.cache_clear()
    get_lexicon.cache_clear()
    yield
    get_settings.cache_clear()
    get_lexicon.cache_clear()
