"""Client-side helper that feeds vocab words into the typing test."""
import logging
from typing import Callable, List, Optional
from urllib.parse import urlparse

import requests
from pydantic import ValidationError

from .config import settings
from .schemas import WordDefinition

logger = logging.getLogger(__name__)

LOCAL_HOSTS = ("localhost", "127.0.0.1")
FALLBACK_WORD = WordDefinition(
    word="fallback", definition="a word used when the vocabulary API is unavailable"
)
FALLBACK_TEXT = "vocabulary - a collection of words and their meanings"
JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}

Notifier = Callable[[str, int], None]


def log_notification(message: str, level: int) -> None:
    logger.warning(f"[notification {level}] {message}")


def api_base_url(origin: str) -> str:
    """Dev server URL on localhost, same-origin API path everywhere else."""
    hostname = urlparse(origin).hostname
    if hostname in LOCAL_HOSTS:
        return settings.DEV_API_URL
    return f"{origin.rstrip('/')}{settings.API_PREFIX}"


class VocabClient:
    def __init__(
        self,
        origin: str,
        session: Optional[requests.Session] = None,
        notify: Notifier = log_notification,
        timeout: float = 5,
    ):
        self.base_url = api_base_url(origin)
        self.session = session or requests.Session()
        self.notify = notify
        self.timeout = timeout

    def init(self) -> None:
        logger.info(f"Vocabulary mode initialized, using API: {self.base_url}")

    def get_random_word_with_definition(self) -> WordDefinition:
        try:
            response = self.session.get(
                f"{self.base_url}/random", headers=JSON_HEADERS, timeout=self.timeout
            )
            if not response.ok:
                raise requests.HTTPError(
                    f"Failed to fetch random word: {response.status_code}",
                    response=response,
                )
            return WordDefinition.model_validate(response.json())
        except (requests.RequestException, ValueError, ValidationError) as e:
            logger.error(f"Error getting random word with definition: {e}")
            self.notify("Failed to get vocabulary word", -1)
            return FALLBACK_WORD

    def get_vocab_words(self) -> List[str]:
        # one word per test keeps vocab mode from repeating itself
        word_def = self.get_random_word_with_definition()
        if word_def.word and word_def.definition:
            return [f"{word_def.word} - {word_def.definition}"]

        logger.error("Error getting vocabulary words: empty word returned")
        self.notify("Failed to load vocabulary words", -1)
        return [FALLBACK_TEXT]
