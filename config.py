"""
Engine configuration via environment variables.
Load with python-dotenv; every value has a default matching the Vietnamese reference setup.
"""
import os
from typing import List, Optional, Tuple

# Load .env if present (optional where env is set by the host application)
try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass

# ----- Locale / tokenizer -----
READING_LOCALE = os.environ.get("READING_LOCALE", "vi")

# ----- Word similarity -----
# Character edit distance at or below which two words count as the same word
SIMILARITY_MAX_DISTANCE = int(os.environ.get("SIMILARITY_MAX_DISTANCE", "2"))

# Vietnamese sound confusions a child commonly makes (both directions are checked)
DEFAULT_CONFUSION_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("d", "gi"),
    ("tr", "ch"),
    ("s", "x"),
    ("f", "ph"),
    ("c", "k"),
    ("qu", "kw"),
)
# Format: "d:gi,tr:ch,s:x" ; empty = defaults
PHONETIC_CONFUSION_PAIRS = os.environ.get("PHONETIC_CONFUSION_PAIRS", "")

# ----- Unicode -----
UNICODE_NORMAL_FORMS = ("NFC", "NFD", "NFKC", "NFKD")
UNICODE_NORMAL_FORM = os.environ.get("UNICODE_NORMAL_FORM", "NFC")


def parse_confusion_pairs(raw: Optional[str]) -> Tuple[Tuple[str, str], ...]:
    """Parse "a:b,c:d" into ((a, b), (c, d)). Empty string -> DEFAULT_CONFUSION_PAIRS."""
    if not raw or not raw.strip():
        return DEFAULT_CONFUSION_PAIRS
    pairs: List[Tuple[str, str]] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        parts = [p.strip().lower() for p in item.split(":")]
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise ValueError(f"Malformed phonetic confusion pair: {item!r} (expected 'sound:sound')")
        pairs.append((parts[0], parts[1]))
    return tuple(pairs)


def get_confusion_pairs() -> Tuple[Tuple[str, str], ...]:
    return parse_confusion_pairs(PHONETIC_CONFUSION_PAIRS)


def get_normal_form() -> str:
    """Return the configured Unicode normalization form (upper-cased)."""
    form = (UNICODE_NORMAL_FORM or "NFC").strip().upper()
    if form not in UNICODE_NORMAL_FORMS:
        raise ValueError(f"UNICODE_NORMAL_FORM must be one of {UNICODE_NORMAL_FORMS}, got {form!r}")
    return form
