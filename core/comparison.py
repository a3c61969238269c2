"""
Reading comparison: grade what a learner read (speech transcript or handwriting OCR)
against the original sentence.

Pipeline per call: normalize -> tokenize -> word alignment -> mistake classification
-> accuracy -> matched words -> feedback. Stateless; one engine can serve many threads.

accuracy = max(0, original_words - mistakes) / original_words, 1.0 for an empty original.
Insertions count as mistakes, so an over-long but otherwise correct reading scores < 100%.
matched_words is a separate, greedy "has any similar spoken word" scan used for highlighting;
it can disagree with the alignment on ambiguous input.
"""
import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

import config
from alignment.word_alignment import align_words
from core.feedback import (
    PerformanceCategory,
    build_messages,
    feedback_message,
    performance_category_for,
)
from core.normalization import normalize_text
from core.similarity import PhoneticConfusionTable, WordSimilarityJudge
from core.tokenizer import Tokenizer, get_tokenizer
from mistakes.classifier import TextMistake, classify_alignment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """Immutable outcome of one comparison. original_text / spoken_text are the raw inputs."""
    original_text: str
    spoken_text: str
    accuracy: float
    mistakes: Tuple[TextMistake, ...] = ()
    matched_words: Tuple[str, ...] = ()
    feedback: str = ""
    total_words: int = 0

    @property
    def correct_words(self) -> int:
        return max(0, self.total_words - len(self.mistakes))

    @property
    def is_perfect(self) -> bool:
        return self.accuracy >= 1.0

    @property
    def is_excellent(self) -> bool:
        return self.accuracy >= 0.95

    @property
    def performance_category(self) -> PerformanceCategory:
        return performance_category_for(self.accuracy)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_text": self.original_text,
            "spoken_text": self.spoken_text,
            "accuracy": round(self.accuracy, 4),
            "mistakes": [m.to_dict() for m in self.mistakes],
            "matched_words": list(self.matched_words),
            "feedback": self.feedback,
            "total_words": self.total_words,
            "correct_words": self.correct_words,
            "performance_category": self.performance_category.value,
        }


def accuracy_from_counts(total_words: int, mistake_count: int) -> float:
    if total_words == 0:
        return 1.0
    return max(0, total_words - mistake_count) / total_words


class TextComparisonEngine:
    """
    Compares original vs spoken text. All collaborators are injected and read-only:
    a Tokenizer, a WordSimilarityJudge (shared by alignment and classification),
    and the feedback message table.
    """

    def __init__(
        self,
        tokenizer: Optional[Tokenizer] = None,
        judge: Optional[WordSimilarityJudge] = None,
        feedback_messages: Optional[Mapping[PerformanceCategory, str]] = None,
        normal_form: str = "NFC",
    ):
        self.tokenizer = tokenizer or get_tokenizer("vi")
        self.judge = judge or WordSimilarityJudge()
        self.feedback_messages = build_messages(feedback_messages)
        form = (normal_form or "").strip().upper()
        if form not in config.UNICODE_NORMAL_FORMS:
            raise ValueError(f"normal_form must be one of {config.UNICODE_NORMAL_FORMS}, got {normal_form!r}")
        self.normal_form = form

    @classmethod
    def from_config(cls, **overrides) -> "TextComparisonEngine":
        """Engine built from config.py (env / .env); keyword arguments win over config."""
        kwargs: Dict[str, Any] = {
            "tokenizer": get_tokenizer(config.READING_LOCALE),
            "judge": WordSimilarityJudge(
                PhoneticConfusionTable.from_pairs(config.get_confusion_pairs()),
                max_distance=config.SIMILARITY_MAX_DISTANCE,
            ),
            "normal_form": config.get_normal_form(),
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    # ----- text processing -----

    def tokenize(self, text: Optional[str]) -> List[str]:
        return self.tokenizer.tokenize(normalize_text(text, self.normal_form))

    def _mistakes_for_tokens(self, original: List[str], spoken: List[str]) -> List[TextMistake]:
        if not original:
            # nothing to read: extra words are not graded
            return []
        ops = align_words(original, spoken, self.judge)
        return classify_alignment(ops, self.judge)

    def _matched_for_tokens(self, original: List[str], spoken: List[str]) -> Tuple[str, ...]:
        matched: List[str] = []
        seen = set()
        for word in original:
            if word in seen:
                continue
            for said in spoken:
                if self.judge.are_similar(word, said):
                    matched.append(word)
                    seen.add(word)
                    break
        return tuple(matched)

    # ----- public API -----

    def compare_texts(self, original: str, spoken: str) -> ComparisonResult:
        original_tokens = self.tokenize(original)
        spoken_tokens = self.tokenize(spoken)

        mistakes = self._mistakes_for_tokens(original_tokens, spoken_tokens)
        accuracy = accuracy_from_counts(len(original_tokens), len(mistakes))
        matched = self._matched_for_tokens(original_tokens, spoken_tokens)

        result = ComparisonResult(
            original_text=original,
            spoken_text=spoken,
            accuracy=accuracy,
            mistakes=tuple(mistakes),
            matched_words=matched,
            total_words=len(original_tokens),
        )
        logger.debug(
            "Compared %d original / %d spoken words: accuracy=%.3f mistakes=%d",
            len(original_tokens), len(spoken_tokens), accuracy, len(mistakes),
        )
        return replace(result, feedback=self.generate_feedback(result))

    def identify_mistakes(self, original: str, spoken: str) -> List[TextMistake]:
        return self._mistakes_for_tokens(self.tokenize(original), self.tokenize(spoken))

    def calculate_accuracy(self, original: str, spoken: str) -> float:
        original_tokens = self.tokenize(original)
        if not original_tokens:
            return 1.0
        mistakes = self._mistakes_for_tokens(original_tokens, self.tokenize(spoken))
        return accuracy_from_counts(len(original_tokens), len(mistakes))

    def find_matched_words(self, original: str, spoken: str) -> Tuple[str, ...]:
        return self._matched_for_tokens(self.tokenize(original), self.tokenize(spoken))

    def generate_feedback(self, result: ComparisonResult) -> str:
        return feedback_message(result.performance_category, self.feedback_messages)


_default_engine: Optional[TextComparisonEngine] = None
_default_lock = threading.Lock()


def get_default_engine() -> TextComparisonEngine:
    """Engine from config.py, built once on first use."""
    global _default_engine
    if _default_engine is None:
        with _default_lock:
            if _default_engine is None:
                _default_engine = TextComparisonEngine.from_config()
    return _default_engine


def compare_texts(original: str, spoken: str) -> ComparisonResult:
    return get_default_engine().compare_texts(original, spoken)


def identify_mistakes(original: str, spoken: str) -> List[TextMistake]:
    return get_default_engine().identify_mistakes(original, spoken)


def calculate_accuracy(original: str, spoken: str) -> float:
    return get_default_engine().calculate_accuracy(original, spoken)


def generate_feedback(result: ComparisonResult) -> str:
    return get_default_engine().generate_feedback(result)
