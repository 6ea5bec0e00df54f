from .config import settings
from .service import VocabService
from .vocabulary import VocabularyManager
from .wordnet import WordNetClient

vocab_manager = VocabularyManager(f"{settings.VOCAB_DIR}")
wordnet_client = WordNetClient()
vocab_service = VocabService(wordnet_client, vocab_manager, max_words=settings.MAX_WORDS)
