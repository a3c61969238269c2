"""
Reading mistake classification.

Turns word alignment ops into structured mistakes:
- omission: expected word not read (severity moderate)
- insertion: extra word read (severity minor)
- mispronunciation: word swapped for a phonetically linked spelling
- substitution: a different word was read

Substitution / mispronunciation severity comes from the character edit distance
between the two words: 1 -> minor, 2 -> moderate, more -> major.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Sequence

from alignment.word_alignment import AlignmentOp, OpKind
from core.similarity import WordSimilarityJudge


class MistakeType(str, Enum):
    MISPRONUNCIATION = "mispronunciation"  # Phát âm sai
    OMISSION = "omission"                  # Bỏ sót từ
    INSERTION = "insertion"                # Thêm từ
    SUBSTITUTION = "substitution"          # Thay thế từ

    @property
    def localized_name(self) -> str:
        return _MISTAKE_TYPE_NAMES[self]


_MISTAKE_TYPE_NAMES = {
    MistakeType.MISPRONUNCIATION: "Phát âm sai",
    MistakeType.OMISSION: "Bỏ sót",
    MistakeType.INSERTION: "Thêm từ",
    MistakeType.SUBSTITUTION: "Thay thế",
}


class MistakeSeverity(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"

    @property
    def localized_name(self) -> str:
        return _SEVERITY_NAMES[self]

    @property
    def score_impact(self) -> float:
        """Fraction of a score a downstream scorer should deduct for this severity."""
        return _SEVERITY_IMPACT[self]


_SEVERITY_NAMES = {
    MistakeSeverity.MINOR: "Nhẹ",
    MistakeSeverity.MODERATE: "Vừa",
    MistakeSeverity.MAJOR: "Nặng",
}
_SEVERITY_IMPACT = {
    MistakeSeverity.MINOR: 0.05,
    MistakeSeverity.MODERATE: 0.10,
    MistakeSeverity.MAJOR: 0.20,
}


@dataclass(frozen=True)
class TextMistake:
    """Single reading mistake. position indexes the alignment sequence, matches included."""
    position: int
    expected_word: str
    actual_word: str
    mistake_type: MistakeType
    severity: MistakeSeverity

    @property
    def description(self) -> str:
        if self.mistake_type is MistakeType.MISPRONUNCIATION:
            return f"Phát âm '{self.expected_word}' thành '{self.actual_word}'"
        if self.mistake_type is MistakeType.OMISSION:
            return f"Bỏ sót từ '{self.expected_word}'"
        if self.mistake_type is MistakeType.INSERTION:
            return f"Thêm từ '{self.actual_word}'"
        return f"Đọc '{self.expected_word}' thành '{self.actual_word}'"

    @property
    def suggestion(self) -> str:
        if self.mistake_type is MistakeType.MISPRONUNCIATION:
            return f"Hãy phát âm rõ ràng từ '{self.expected_word}'"
        if self.mistake_type is MistakeType.OMISSION:
            return f"Đừng quên đọc từ '{self.expected_word}'"
        if self.mistake_type is MistakeType.INSERTION:
            return f"Không cần đọc thêm từ '{self.actual_word}'"
        return f"Từ đúng là '{self.expected_word}', không phải '{self.actual_word}'"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "expected_word": self.expected_word,
            "actual_word": self.actual_word,
            "mistake_type": self.mistake_type.value,
            "severity": self.severity.value,
            "description": self.description,
            "suggestion": self.suggestion,
        }


def severity_for_distance(distance: int) -> MistakeSeverity:
    """Map character edit distance to severity (0 cannot be a real mistake; treated as minor)."""
    if distance <= 1:
        return MistakeSeverity.MINOR
    if distance == 2:
        return MistakeSeverity.MODERATE
    return MistakeSeverity.MAJOR


def mistake_type_for(expected: str, actual: str, judge: WordSimilarityJudge) -> MistakeType:
    if judge.are_phonetically_similar(expected, actual):
        return MistakeType.MISPRONUNCIATION
    return MistakeType.SUBSTITUTION


def classify_alignment(
    ops: Sequence[AlignmentOp],
    judge: WordSimilarityJudge,
) -> List[TextMistake]:
    """One TextMistake per non-match op, in alignment order. All matches -> []."""
    mistakes: List[TextMistake] = []
    for position, op in enumerate(ops):
        if op.kind is OpKind.MATCH:
            continue
        if op.kind is OpKind.DELETION:
            mistakes.append(TextMistake(
                position=position,
                expected_word=op.original or "",
                actual_word="",
                mistake_type=MistakeType.OMISSION,
                severity=MistakeSeverity.MODERATE,
            ))
        elif op.kind is OpKind.INSERTION:
            mistakes.append(TextMistake(
                position=position,
                expected_word="",
                actual_word=op.spoken or "",
                mistake_type=MistakeType.INSERTION,
                severity=MistakeSeverity.MINOR,
            ))
        else:
            expected, actual = op.original or "", op.spoken or ""
            mistakes.append(TextMistake(
                position=position,
                expected_word=expected,
                actual_word=actual,
                mistake_type=mistake_type_for(expected, actual, judge),
                severity=severity_for_distance(judge.distance(expected, actual)),
            ))
    return mistakes
