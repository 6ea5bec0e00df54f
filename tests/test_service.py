"""Tests for vocab word selection."""
import pandas as pd
import pytest

from conftest import FakeLexicon, wd
from vocabtype.service import VocabService
from vocabtype.vocabulary import FALLBACK_VOCABULARY, VocabularyManager


@pytest.fixture
def vocabulary(tmp_path):
    return VocabularyManager(str(tmp_path))


def test_random_word_prefers_wordnet(vocabulary):
    service = VocabService(FakeLexicon([wd("lexeme")]), vocabulary)
    assert service.random_word().word == "lexeme"


def test_random_word_falls_back_when_wordnet_fails(vocabulary, caplog):
    service = VocabService(FakeLexicon(), vocabulary)
    word = service.random_word()
    assert word in FALLBACK_VOCABULARY
    assert "using fallback vocabulary" in caplog.text


@pytest.mark.parametrize("count", [1, 5, 25, 50])
def test_words_returns_requested_count_without_duplicates(vocabulary, count):
    service = VocabService(FakeLexicon(), vocabulary)
    words = service.words(count)
    assert len(words) == count
    assert len({w.word for w in words}) == count


def test_words_is_capped_at_max_words(vocabulary):
    service = VocabService(FakeLexicon(), vocabulary, max_words=50)
    assert len(service.words(500)) == 50


def test_duplicate_wordnet_results_are_replaced(vocabulary):
    lexicon = FakeLexicon([wd("echo"), wd("echo"), wd("echo")])
    service = VocabService(lexicon, vocabulary)

    words = service.words(3)

    assert words[0].word == "echo"
    assert [w.word for w in words].count("echo") == 1
    assert all(w in FALLBACK_VOCABULARY for w in words[1:])


def test_mixes_wordnet_and_fallback(vocabulary):
    lexicon = FakeLexicon([wd("alpha"), None, wd("gamma")])
    service = VocabService(lexicon, vocabulary)

    words = service.words(3)

    assert words[0].word == "alpha"
    assert words[1] in FALLBACK_VOCABULARY
    assert words[2].word == "gamma"


def test_exhausted_fallback_stops_early(vocabulary):
    vocabulary.words = [wd("one"), wd("two")]
    service = VocabService(FakeLexicon(), vocabulary)
    words = service.words(5)
    assert sorted(w.word for w in words) == ["one", "two"]


def test_non_positive_count_returns_nothing(vocabulary):
    service = VocabService(FakeLexicon(), vocabulary)
    assert service.words(0) == []
    assert service.words(-4) == []


@pytest.mark.parametrize("count", [10, 50])
def test_csv_words_extend_pool_when_wordnet_down(tmp_path, count):
    pd.DataFrame(
        {
            "word": ["apple", "banana", "cherry"],
            "definition": ["a red fruit", "a yellow fruit", "a small stone fruit"],
        }
    ).to_csv(tmp_path / "fruit.csv", index=False)
    service = VocabService(FakeLexicon(), VocabularyManager(str(tmp_path)))

    words = service.words(count)

    assert len(words) == count
    assert len({w.word for w in words}) == count
