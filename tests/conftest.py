"""Test configuration."""
import os
import tempfile

import pytest

# Point file-backed settings at a scratch directory before any imports
_scratch = tempfile.mkdtemp(prefix="vocabtype-test-")
os.environ["LOG_DIR"] = os.path.join(_scratch, "log")
os.environ["DB_DIR"] = os.path.join(_scratch, "db")
os.environ["VOCAB_DIR"] = os.path.join(_scratch, "vocabulary")

# Import after environment setup
from vocabtype.schemas import WordDefinition  # noqa: E402


class FakeLexicon:
    """Stands in for WordNetClient, replaying a fixed sequence of results."""

    def __init__(self, results=None):
        self.results = list(results or [])
        self.calls = 0

    @property
    def is_available(self):
        return bool(self.results)

    def get_random_word(self):
        self.calls += 1
        if not self.results:
            return None
        return self.results.pop(0)


def wd(word, definition=None):
    return WordDefinition(word=word, definition=definition or f"meaning of {word}")


@pytest.fixture
def fake_lexicon():
    return FakeLexicon()


@pytest.fixture
def wordnet_down(monkeypatch):
    """Makes the shared WordNet client behave as if the corpus is missing."""
    from vocabtype.globals import wordnet_client

    monkeypatch.setattr(wordnet_client, "get_random_word", lambda: None)
    return wordnet_client
