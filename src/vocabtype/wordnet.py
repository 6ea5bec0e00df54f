import logging
import random
from typing import List, Optional

import nltk
from nltk.corpus import wordnet

from .config import settings
from .schemas import WordDefinition

logger = logging.getLogger(__name__)


class WordNetClient:
    """Random word lookups against the NLTK WordNet corpus.

    The lemma list is loaded on first use and cached for the lifetime of the
    process. A failed load is not retried by lookups, and the corpus download
    is attempted at most once; call ``init()`` directly to retry. Every lookup
    failure is logged and reported as ``None`` so that callers can fall back
    to the static vocabulary.
    """

    def __init__(self, auto_download: bool = settings.WORDNET_AUTO_DOWNLOAD):
        self.auto_download = auto_download
        self.initialized = False
        self.init_failed = False
        self._download_attempted = False
        self.word_list: List[str] = []

    @property
    def is_available(self) -> bool:
        return self.initialized

    def _ensure_corpus(self):
        try:
            nltk.data.find("corpora/wordnet")
        except LookupError:
            if not self.auto_download or self._download_attempted:
                raise
            self._download_attempted = True
            logger.info("WordNet corpus not found, downloading")
            nltk.download("wordnet", quiet=True)

    def init(self) -> bool:
        if self.initialized:
            return True

        try:
            self._ensure_corpus()
            self.word_list = list(wordnet.all_lemma_names())

            if not self.word_list:
                logger.error("WordNet initialization failed: No words found in database")
                self.init_failed = True
                return False

            logger.info(f"WordNet initialized successfully with {len(self.word_list)} words")
            self.initialized = True
            self.init_failed = False
            return True
        except Exception as e:
            logger.error(f"Failed to initialize WordNet: {e}")
            self.init_failed = True
            return False

    def get_random_word(self) -> Optional[WordDefinition]:
        try:
            if not self.initialized:
                if self.init_failed or not self.init():
                    return None

            lemma = random.choice(self.word_list)
            if not lemma:
                logger.error("Got empty random word from WordNet")
                return None

            synsets = wordnet.synsets(lemma)
            if not synsets:
                return None

            gloss = synsets[0].definition()
            if not isinstance(gloss, str):
                return None

            # lemma names join multi-word entries with underscores
            return WordDefinition(word=lemma.replace("_", " "), definition=gloss)
        except Exception as e:
            logger.error(f"Error in get_random_word: {e}")
            return None
