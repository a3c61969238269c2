"""
Reading mistake classification: typed, severity-scored mistakes from a word alignment.
"""
from mistakes.classifier import (
    classify_alignment,
    mistake_type_for,
    severity_for_distance,
    MistakeSeverity,
    MistakeType,
    TextMistake,
)

__all__ = [
    "classify_alignment",
    "mistake_type_for",
    "severity_for_distance",
    "MistakeSeverity",
    "MistakeType",
    "TextMistake",
]
