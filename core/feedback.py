"""
Performance bands and encouragement messages shown after a reading attempt.

Bands: excellent >= 95%, good >= 85%, fair >= 70%, otherwise needs_improvement.
Message text is configuration; the defaults are the app's Vietnamese copy.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

# Band lower bounds (accuracy in [0, 1])
EXCELLENT_THRESHOLD = 0.95
GOOD_THRESHOLD = 0.85
FAIR_THRESHOLD = 0.70


class PerformanceCategory(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_IMPROVEMENT = "needs_improvement"

    @property
    def localized_name(self) -> str:
        return _LOCALIZED_NAMES[self]

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    @property
    def encouragement_message(self) -> str:
        return DEFAULT_MESSAGES[self]


_LOCALIZED_NAMES = {
    PerformanceCategory.EXCELLENT: "Xuất sắc",
    PerformanceCategory.GOOD: "Tốt",
    PerformanceCategory.FAIR: "Khá",
    PerformanceCategory.NEEDS_IMPROVEMENT: "Cần cải thiện",
}

_EMOJI = {
    PerformanceCategory.EXCELLENT: "🌟",
    PerformanceCategory.GOOD: "👏",
    PerformanceCategory.FAIR: "😊",
    PerformanceCategory.NEEDS_IMPROVEMENT: "💪",
}

DEFAULT_MESSAGES: Mapping[PerformanceCategory, str] = MappingProxyType({
    PerformanceCategory.EXCELLENT: "Tuyệt vời! Bé đọc hoàn hảo!",
    PerformanceCategory.GOOD: "Rất tốt! Chỉ có vài lỗi nhỏ thôi!",
    PerformanceCategory.FAIR: "Khá tốt! Hãy cố gắng đọc chậm và rõ hơn nhé!",
    PerformanceCategory.NEEDS_IMPROVEMENT: "Hãy thử đọc lại nhé! Đọc chậm và rõ ràng sẽ giúp bé đọc tốt hơn!",
})


def performance_category_for(accuracy: float) -> PerformanceCategory:
    if accuracy >= EXCELLENT_THRESHOLD:
        return PerformanceCategory.EXCELLENT
    if accuracy >= GOOD_THRESHOLD:
        return PerformanceCategory.GOOD
    if accuracy >= FAIR_THRESHOLD:
        return PerformanceCategory.FAIR
    return PerformanceCategory.NEEDS_IMPROVEMENT


def build_messages(overrides: Optional[Mapping[PerformanceCategory, str]] = None) -> Mapping[PerformanceCategory, str]:
    """Defaults with per-band overrides applied; returned mapping is read-only."""
    messages = dict(DEFAULT_MESSAGES)
    if overrides:
        for category, text in overrides.items():
            messages[PerformanceCategory(category)] = text
    return MappingProxyType(messages)


def feedback_message(
    category: PerformanceCategory,
    messages: Mapping[PerformanceCategory, str] = DEFAULT_MESSAGES,
) -> str:
    """Encouragement text followed by the band emoji."""
    return f"{messages[category]} {category.emoji}"
