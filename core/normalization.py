import re
import unicodedata
from typing import Optional

_WHITESPACE_RE = re.compile(r"\s+")


def strip_punctuation(text: str) -> str:
    """Drop every character in a Unicode punctuation category (Pc, Pd, Ps, Pe, Pi, Pf, Po)."""
    return "".join(ch for ch in text if not unicodedata.category(ch).startswith("P"))


def strip_format_characters(text: str) -> str:
    """Drop invisible format characters (Cf: soft hyphen, ZWJ, ZWNJ); they sit inside words."""
    return "".join(ch for ch in text if unicodedata.category(ch) != "Cf")


def normalize_text(text: Optional[str], normal_form: str = "NFC") -> str:
    """
    Normalize learner or reference text for word comparison.
    One Unicode form (so precomposed and decomposed Vietnamese tone marks compare equal),
    lowercase, no punctuation, single spaces, trimmed. Any input, including None, is valid.
    """
    if not text:
        return ""

    text = unicodedata.normalize(normal_form, text)
    text = text.lower()
    text = strip_format_characters(text)
    text = strip_punctuation(text)
    # Normalize whitespace
    text = _WHITESPACE_RE.sub(" ", text)

    return text.strip()
