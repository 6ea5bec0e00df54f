import logging
import random
from typing import List

from .schemas import WordDefinition
from .vocabulary import VocabularyManager
from .wordnet import WordNetClient

logger = logging.getLogger(__name__)


class VocabService:
    """Picks vocab words, preferring WordNet and falling back to the static list."""

    def __init__(
        self,
        lexicon: WordNetClient,
        vocabulary: VocabularyManager,
        max_words: int = 50,
    ):
        self.lexicon = lexicon
        self.vocabulary = vocabulary
        self.max_words = max_words

    def random_word(self) -> WordDefinition:
        result = self.lexicon.get_random_word()
        if result:
            return result
        logger.warning("WordNet failed to return a word, using fallback vocabulary")
        return self.vocabulary.get_random_definition()

    def words(self, count: int) -> List[WordDefinition]:
        limited = min(count, self.max_words)
        words: List[WordDefinition] = []
        used = set()

        for _ in range(max(limited, 0)):
            candidate = self.lexicon.get_random_word()
            if candidate is None or candidate.word in used:
                candidate = self._fallback_word(used)
                if candidate is None:
                    logger.warning(f"Fallback vocabulary exhausted after {len(words)} words")
                    break
            used.add(candidate.word)
            words.append(candidate)

        return words

    def _fallback_word(self, used: set):
        remaining = [w for w in self.vocabulary.words if w.word not in used]
        if not remaining:
            if not self.vocabulary.words:
                default = self.vocabulary.get_random_definition()
                return None if default.word in used else default
            return None
        return random.choice(remaining)
