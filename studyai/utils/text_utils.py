"""
Text processing utilities
"""
import re
from typing import List

# Runs of sentence-ending punctuation
SENTENCE_BOUNDARY = re.compile(r'[.!?]+')

# Fragments at or below this length are dropped
MIN_SENTENCE_LENGTH = 10


def split_sentences(text: str) -> List[str]:
    """Split text on sentence-ending punctuation and keep fragments longer than 10 chars

    Lengths are counted in code points, so astral characters such as emoji
    count once here where a UTF-16 count would see two units.
    """
    fragments = (s.strip() for s in SENTENCE_BOUNDARY.split(text))
    return [s for s in fragments if len(s) > MIN_SENTENCE_LENGTH]


def preview(sentence: str, length: int) -> str:
    """Return the first `length` characters of a sentence"""
    return sentence[:length]
