"""
Word-level alignment between reference text and the learner's reading.
"""
from alignment.word_alignment import align_words, AlignmentOp, OpKind

__all__ = [
    "align_words",
    "AlignmentOp",
    "OpKind",
]
