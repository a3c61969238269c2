"""
Word similarity judge: decides whether a spoken word counts as the expected word.

A pair is "the same word" when it is identical, within a small character edit
distance, or equal after swapping one configured sound spelling for its common
confusion (Vietnamese: d/gi, tr/ch, s/x, f/ph, c/k, qu/kw).
The judge is immutable and is shared by the aligner and the mistake classifier,
so alignment and classification always agree.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from rapidfuzz.distance import Levenshtein

DEFAULT_MAX_DISTANCE = 2


def levenshtein_distance(a: str, b: str) -> int:
    """Character-level edit distance (insert / delete / substitute cost 1)."""
    return Levenshtein.distance(a, b)


@dataclass(frozen=True)
class PhoneticConfusionTable:
    """Immutable list of sound-spelling pairs a learner commonly swaps."""
    pairs: Tuple[Tuple[str, str], ...]

    def __post_init__(self):
        pairs = tuple((str(s1), str(s2)) for s1, s2 in self.pairs)
        for s1, s2 in pairs:
            if not s1 or not s2:
                raise ValueError(f"Phonetic confusion pair has an empty sound: {(s1, s2)!r}")
        object.__setattr__(self, "pairs", pairs)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "PhoneticConfusionTable":
        return cls(tuple(pairs))

    def oriented(self) -> Iterator[Tuple[str, str]]:
        """Each pair in both directions: (d, gi), (gi, d), ..."""
        for s1, s2 in self.pairs:
            yield s1, s2
            yield s2, s1


VIETNAMESE_CONFUSIONS = PhoneticConfusionTable((
    ("d", "gi"),
    ("tr", "ch"),
    ("s", "x"),
    ("f", "ph"),
    ("c", "k"),
    ("qu", "kw"),
))


class WordSimilarityJudge:
    """Pure similarity oracle; safe to share across threads."""

    __slots__ = ("_table", "_max_distance")

    def __init__(
        self,
        confusion_table: PhoneticConfusionTable = VIETNAMESE_CONFUSIONS,
        max_distance: int = DEFAULT_MAX_DISTANCE,
    ):
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")
        self._table = confusion_table
        self._max_distance = max_distance

    @property
    def confusion_table(self) -> PhoneticConfusionTable:
        return self._table

    @property
    def max_distance(self) -> int:
        return self._max_distance

    def distance(self, a: str, b: str) -> int:
        return levenshtein_distance(a, b)

    def are_phonetically_similar(self, a: str, b: str) -> bool:
        """True if replacing one sound spelling with its confusion turns one word into the other."""
        for s1, s2 in self._table.oriented():
            if a.replace(s1, s2) == b or b.replace(s2, s1) == a:
                return True
        return False

    def are_similar(self, a: str, b: str) -> bool:
        if a == b:
            return True
        # score_cutoff lets rapidfuzz stop early once the bound is exceeded
        if Levenshtein.distance(a, b, score_cutoff=self._max_distance) <= self._max_distance:
            return True
        return self.are_phonetically_similar(a, b)
