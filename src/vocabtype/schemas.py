from __future__ import annotations

import re
from typing import Annotated, Dict, List, Literal, Optional, get_args

from pydantic import AfterValidator, BaseModel, Field, StringConstraints, TypeAdapter

NUMERIC_KEY = re.compile(r"\d+", re.ASCII)

Difficulty = Literal["normal", "expert", "master"]
DefaultWordsMode = Literal["10", "25", "50", "100"]
DefaultTimeMode = Literal["15", "30", "60", "120"]
QuoteLength = Literal["short", "medium", "long", "thicc"]

# Number of seconds / words / quote id, as a string
StringNumber = Annotated[str, StringConstraints(pattern=r"^[0-9]+$")]


class WordDefinition(BaseModel):
    word: str
    definition: str


class PersonalBest(BaseModel):
    acc: float = Field(ge=0, le=100)
    consistency: float = Field(ge=0, le=100)
    difficulty: Difficulty
    lazyMode: Optional[bool] = None
    language: str = Field(max_length=100, pattern=r"[\w+]+")
    punctuation: Optional[bool] = None
    numbers: Optional[bool] = None
    raw: float = Field(ge=0)
    wpm: float = Field(ge=0)
    timestamp: float = Field(ge=0)


class PersonalBests(BaseModel):
    time: Dict[StringNumber, List[PersonalBest]]
    words: Dict[StringNumber, List[PersonalBest]]
    quote: Dict[StringNumber, List[PersonalBest]]
    custom: Dict[Literal["custom"], List[PersonalBest]]
    zen: Dict[Literal["zen"], List[PersonalBest]]
    vocab: Dict[Literal["vocab"], List[PersonalBest]]


Mode = Literal["time", "words", "quote", "custom", "zen", "vocab"]
MODES = get_args(Mode)


def _check_mode2(value: str) -> str:
    if value in ("zen", "custom") or NUMERIC_KEY.fullmatch(value):
        return value
    raise ValueError('Needs to be either a number, "zen" or "custom".')


# Second-level mode key: a number as string, "zen" or "custom"
Mode2 = Annotated[str, AfterValidator(_check_mode2)]

mode_adapter = TypeAdapter(Mode)
mode2_adapter = TypeAdapter(Mode2)


def personal_bests_for(pbs: PersonalBests, mode: str, mode2: str) -> List[PersonalBest]:
    """Returns the personal bests recorded under mode/mode2, empty if none."""
    mode = mode_adapter.validate_python(mode)
    mode2 = mode2_adapter.validate_python(mode2)
    return getattr(pbs, mode).get(mode2, [])
