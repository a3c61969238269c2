"""
Word tokenization for reading comparison.

Tokenizers take already-normalized text and return the ordered word tokens the aligner
consumes positionally. The default segmenter follows Unicode word boundaries closely
enough for space-delimited scripts (Vietnamese syllables, Latin, Cyrillic): letters,
combining marks and digits form words; anything else is a boundary.
Locale-specific segmenters can be registered per locale code.
"""
import logging
import unicodedata
from itertools import groupby
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

# Unicode major categories that belong inside a word: Letter, Mark, Number
WORD_CATEGORIES = ("L", "M", "N")
# Format characters (soft hyphen, ZWJ, ZWNJ) never end a word; they are dropped
FORMAT_CATEGORY = "Cf"


def _is_word_char(ch: str) -> bool:
    return unicodedata.category(ch)[0] in WORD_CATEGORIES


class Tokenizer:
    """Interface: one method, tokenize(text) -> list of non-empty tokens."""

    def tokenize(self, text: str) -> List[str]:
        raise NotImplementedError


class UnicodeWordTokenizer(Tokenizer):
    """Splits on whitespace and non-word characters; keeps letter/mark/digit runs."""

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        text = "".join(ch for ch in text if unicodedata.category(ch) != FORMAT_CATEGORY)
        tokens: List[str] = []
        for is_word, run in groupby(text, key=_is_word_char):
            if is_word:
                tokens.append("".join(run))
        return tokens


class WhitespaceTokenizer(Tokenizer):
    """Plain whitespace split, for callers whose input is already word-segmented."""

    def tokenize(self, text: str) -> List[str]:
        return [t for t in (text or "").split() if t]


_REGISTRY: Dict[str, Callable[[], Tokenizer]] = {
    "vi": UnicodeWordTokenizer,
    "en": UnicodeWordTokenizer,
}


def _locale_key(locale: str) -> str:
    # "vi_VN", "VI-vn" and "vi-VN" share one key
    return (locale or "").strip().lower().replace("_", "-")


def register_tokenizer(locale: str, factory: Callable[[], Tokenizer]) -> None:
    """Register a tokenizer factory for a locale code (e.g. "vi", "vi-VN")."""
    key = _locale_key(locale)
    if not key:
        raise ValueError("locale must be a non-empty string")
    _REGISTRY[key] = factory


def get_tokenizer(locale: str = "vi") -> Tokenizer:
    """
    Return a tokenizer for the locale. Tries the full code, then the language part
    ("vi-VN" -> "vi"); unknown locales fall back to UnicodeWordTokenizer.
    """
    key = _locale_key(locale)
    factory = _REGISTRY.get(key) or _REGISTRY.get(key.split("-")[0])
    if factory is None:
        logger.warning("No tokenizer registered for locale %r; using Unicode word segmentation", locale)
        return UnicodeWordTokenizer()
    return factory()
