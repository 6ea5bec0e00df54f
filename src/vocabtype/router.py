import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from .config import settings
from .errors import InvalidCountError
from .globals import vocab_service
from .schemas import WordDefinition

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.API_PREFIX, tags=["vocab"])

LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_count(raw: Optional[str]) -> Optional[int]:
    """Reads the leading integer of ``raw``; None when there is none."""
    match = LEADING_INT.match(raw or "")
    if not match:
        return None
    return int(match.group(1))


# --- Dependencies ---
def get_word_count(count: Optional[str] = Query(None)) -> int:
    if count is None or count == "":
        return settings.DEFAULT_WORD_COUNT
    parsed = parse_count(count)
    if parsed is None or parsed < 1:
        raise InvalidCountError()
    return min(parsed, settings.MAX_WORDS)


# --- Routes ---
@router.get("/random", response_model=WordDefinition)
def get_random_word():
    try:
        return vocab_service.random_word()
    except Exception as e:
        logger.error(f"Error in get_random_word: {e}")
        return JSONResponse({"message": "Failed to get random word"}, status_code=500)


@router.get("/words", response_model=List[WordDefinition])
def get_vocab_words(count: int = Depends(get_word_count)):
    try:
        return vocab_service.words(count)
    except Exception as e:
        logger.error(f"Error in get_vocab_words: {e}")
        return JSONResponse(
            {"message": "Failed to get vocabulary words"}, status_code=500
        )
