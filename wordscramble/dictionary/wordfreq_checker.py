"""
Dictionary backed by the wordfreq English word list.

A word counts as real when wordfreq has seen it often enough: its Zipf
frequency must reach `min_zipf`. wordfreq ships its data with the package,
so lookups are local (no network).

Notes:
  - Only purely alphabetic strings are looked up. wordfreq tokenizes its
    input, so "ice cream" or "don't" would otherwise be scored as phrases.
  - Misspellings and junk tokens sit far below the default threshold
    ("zzzqx" scores 0.0, "cat" scores about 4.6).
"""

from __future__ import annotations

import logging

from wordfreq import available_languages, zipf_frequency

from wordscramble.config import DEFAULT_MIN_ZIPF, DICTIONARY_LANGUAGE
from .base import BaseChecker, DictionaryUnavailable, register

logger = logging.getLogger(__name__)


@register
class WordfreqChecker(BaseChecker):
    id = "wordfreq"
    name = "wordfreq"

    def __init__(self, lang: str = DICTIONARY_LANGUAGE, min_zipf: float = DEFAULT_MIN_ZIPF):
        if lang not in available_languages():
            raise DictionaryUnavailable(f"wordfreq has no word list for language {lang!r}")
        self.lang = lang
        self.min_zipf = float(min_zipf)

    def is_real(self, word: str) -> bool:
        if not word or not word.isalpha():
            return False
        try:
            freq = zipf_frequency(word, self.lang)
        except (LookupError, OSError) as e:
            raise DictionaryUnavailable(f"wordfreq lookup failed for {word!r}") from e
        logger.debug("zipf(%s, %s) = %.2f", word, self.lang, freq)
        return freq >= self.min_zipf
