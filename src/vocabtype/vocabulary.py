import glob
import logging
import os
import random
from typing import List

import pandas as pd

from .schemas import WordDefinition

logger = logging.getLogger(__name__)


def _wd(word: str, definition: str) -> WordDefinition:
    return WordDefinition(word=word, definition=definition)


# Two words for every letter of the alphabet
FALLBACK_VOCABULARY: List[WordDefinition] = [
    _wd("abate", "to reduce in amount, degree, or intensity"),
    _wd("aberrant", "deviating from the usual or natural type"),
    _wd("benevolent", "characterized by or expressing goodwill or kindly feelings"),
    _wd("brevity", "concise and exact use of words in writing or speech"),
    _wd("cacophony", "a harsh, discordant mixture of sounds"),
    _wd("cognizant", "aware or having knowledge of something"),
    _wd("diligent", "showing persistent and hardworking effort"),
    _wd("duality", "an instance of opposition or contrast between two concepts"),
    _wd("ephemeral", "lasting for a very short time"),
    _wd("eloquent", "fluent or persuasive in speaking or writing"),
    _wd("fallacy", "a mistaken belief, especially one based on unsound argument"),
    _wd("fortitude", "courage in pain or adversity"),
    _wd("gratuitous", "done without good reason; uncalled for"),
    _wd("gregarious", "fond of company; sociable"),
    _wd(
        "harbinger",
        "a person or thing that announces or signals the approach of another",
    ),
    _wd("hypothesis", "a supposition or proposed explanation made on limited evidence"),
    _wd("imminent", "about to happen"),
    _wd("incessant", "continuing without pause or interruption"),
    _wd("juxtapose", "to place or deal with close together for contrasting effect"),
    _wd("jubilant", "feeling or expressing great happiness and triumph"),
    _wd("kaleidoscope", "a constantly changing pattern or sequence of elements"),
    _wd("kinship", "blood relationship or family connection"),
    _wd("lethargic", "affected by lethargy; sluggish and apathetic"),
    _wd("luminous", "giving off light; bright or shining"),
    _wd("meticulous", "showing great attention to detail; very careful and precise"),
    _wd("mundane", "lacking interest or excitement; dull"),
    _wd("nefarious", "extremely wicked or villainous"),
    _wd("nostalgia", "a sentimental longing for the past"),
    _wd("obsolete", "no longer produced or used; out of date"),
    _wd("omniscient", "knowing everything"),
    _wd("persistent", "continuing firmly despite difficulty"),
    _wd("prudent", "acting with or showing care and thought for the future"),
    _wd("quintessential", "representing the most perfect example of a quality"),
    _wd("quixotic", "exceedingly idealistic; unrealistic and impractical"),
    _wd("resilient", "able to withstand or recover quickly from difficult conditions"),
    _wd("ruminate", "think deeply about something"),
    _wd(
        "serendipity",
        "the occurrence and development of events by chance in a happy or beneficial way",
    ),
    _wd("superfluous", "unnecessary, especially through being more than enough"),
    _wd(
        "tenacious",
        "tending to keep a firm hold of something; clinging or adhering closely",
    ),
    _wd("transient", "lasting only for a short time; impermanent"),
    _wd("ubiquitous", "present, appearing, or found everywhere"),
    _wd("utilitarian", "designed to be useful or practical rather than attractive"),
    _wd("verbose", "using or containing more words than needed"),
    _wd(
        "vicarious",
        "experienced in the imagination through the feelings or actions of another person",
    ),
    _wd(
        "whimsical",
        "playfully quaint or fanciful, especially in an appealing and amusing way",
    ),
    _wd("wistful", "having or showing a feeling of vague or regretful longing"),
    _wd("xenophobia", "dislike of or prejudice against people from other countries"),
    _wd("xeric", "characterized by or adapted to an extremely dry habitat"),
    _wd("yearn", "to long for something, typically something unattainable"),
    _wd("yielding", "inclined to give way to pressure; not hard or rigid"),
    _wd(
        "zealous",
        "having or showing great energy or enthusiasm in pursuit of an objective",
    ),
    _wd("zenith", "the highest point reached by a celestial or other object"),
]

DEFAULT_WORD = _wd("default", "a standard word used when no vocabulary is available")


class VocabularyManager:
    """Manages the fallback vocabulary used when WordNet is unavailable."""

    def __init__(self, directory: str):
        self.directory = directory
        self.words: List[WordDefinition] = []
        self.load_all()

    def __len__(self) -> int:
        return len(self.words)

    def load_all(self):
        # CSV words extend the built-in list, never replace it
        self.words = list(FALLBACK_VOCABULARY)
        if not os.path.exists(self.directory):
            os.makedirs(self.directory, exist_ok=True)
            logger.warning(f"Created directory {self.directory}. Add CSV files to extend the fallback vocabulary.")

        seen = {w.word for w in self.words}
        csv_files = sorted(glob.glob(os.path.join(self.directory, "*.csv")))
        for file_path in csv_files:
            file_name = os.path.splitext(os.path.basename(file_path))[0]
            try:
                df = pd.read_csv(file_path, encoding="utf-8")
            except Exception as e:
                logger.error(f"Failed to load {file_path}: {e}")
                continue
            if "word" not in df.columns or "definition" not in df.columns:
                logger.error(f"Skipping {file_name}: Missing columns.")
                continue

            df = df.dropna(subset=["word", "definition"])
            loaded = 0
            for record in df[["word", "definition"]].to_dict("records"):
                word = str(record["word"]).strip()
                if not word or word in seen:
                    continue
                seen.add(word)
                self.words.append(_wd(word, str(record["definition"]).strip()))
                loaded += 1
            logger.info(f"Loaded {loaded} words from {file_name}")

        logger.info(f"Fallback vocabulary holds {len(self.words)} words")

    def get_random_definition(self) -> WordDefinition:
        if not self.words:
            return DEFAULT_WORD
        return random.choice(self.words)
