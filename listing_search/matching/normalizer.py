"""
Text normalization helpers.

Case folding and accent stripping shared by the string matcher, plus a
public tokenizer for callers that index listing text.
"""

import re
import unicodedata
from typing import List, Optional

from listing_search.config import FuzzyConfig

_NON_WORD = re.compile(r'[^\w\s]')

_DEFAULT_CONFIG = FuzzyConfig()


def strip_accents(text: str) -> str:
    """Remove diacritics by decomposing and dropping combining marks.

    Args:
        text: Text to strip

    Returns:
        Text with combining marks removed, e.g. "Café" -> "Cafe"
    """
    decomposed = unicodedata.normalize('NFD', text)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize(text: str, config: Optional[FuzzyConfig] = None) -> str:
    """Normalize text for comparison according to ``config``.

    Args:
        text: Text to normalize
        config: Fuzzy configuration (case and accent handling)

    Returns:
        Normalized text
    """
    config = config or _DEFAULT_CONFIG

    if config.ignore_case:
        text = text.lower()

    if config.ignore_accents:
        text = strip_accents(text)

    return text


def tokenize(text: str) -> List[str]:
    """Split text into lowercase search tokens.

    Punctuation becomes whitespace and single-character tokens are dropped.
    """
    cleaned = _NON_WORD.sub(' ', text.lower())
    return [token for token in cleaned.split() if len(token) > 1]
