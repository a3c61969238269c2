"""
Word-level alignment between the reference sentence and what the learner said.

Minimum edit-cost alignment (Wagner-Fischer) over word tokens. Substitution costs 0
when the similarity judge accepts the pair, otherwise 1; deletion and insertion cost 1.

Backtracking prefers the diagonal (match / substitution) whenever it reaches the
optimal cost, then deletion, then insertion. Mistake counts and positions depend on
this order, so it must not change.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from core.similarity import WordSimilarityJudge


class OpKind(str, Enum):
    MATCH = "match"
    SUBSTITUTION = "substitution"
    DELETION = "deletion"
    INSERTION = "insertion"


@dataclass(frozen=True)
class AlignmentOp:
    """One step of the alignment. original is None for insertions, spoken is None for deletions."""
    kind: OpKind
    original: Optional[str] = None
    spoken: Optional[str] = None

    @classmethod
    def match(cls, original: str, spoken: str) -> "AlignmentOp":
        return cls(OpKind.MATCH, original, spoken)

    @classmethod
    def substitution(cls, original: str, spoken: str) -> "AlignmentOp":
        return cls(OpKind.SUBSTITUTION, original, spoken)

    @classmethod
    def deletion(cls, original: str) -> "AlignmentOp":
        return cls(OpKind.DELETION, original, None)

    @classmethod
    def insertion(cls, spoken: str) -> "AlignmentOp":
        return cls(OpKind.INSERTION, None, spoken)


def _cost_matrix(
    original: Sequence[str],
    spoken: Sequence[str],
    judge: WordSimilarityJudge,
):
    """Return (dp, sub_cost) where sub_cost[i][j] is the cost of pairing original[i] with spoken[j]."""
    m, n = len(original), len(spoken)
    sub_cost = [
        [0 if judge.are_similar(o, s) else 1 for s in spoken]
        for o in original
    ]
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            dp[i][j] = min(
                dp[i - 1][j] + 1,  # deletion
                dp[i][j - 1] + 1,  # insertion
                dp[i - 1][j - 1] + sub_cost[i - 1][j - 1],
            )
    return dp, sub_cost


def align_words(
    original: Sequence[str],
    spoken: Sequence[str],
    judge: WordSimilarityJudge,
) -> List[AlignmentOp]:
    """
    Align original tokens to spoken tokens.

    Returns ops in forward order. Concatenating op.original (non-None) gives back
    `original`; concatenating op.spoken (non-None) gives back `spoken`.
    """
    dp, sub_cost = _cost_matrix(original, spoken, judge)

    ops: List[AlignmentOp] = []
    i, j = len(original), len(spoken)
    while i > 0 or j > 0:
        if i > 0 and j > 0:
            cost = sub_cost[i - 1][j - 1]
            if dp[i][j] == dp[i - 1][j - 1] + cost:
                if cost == 0:
                    ops.append(AlignmentOp.match(original[i - 1], spoken[j - 1]))
                else:
                    ops.append(AlignmentOp.substitution(original[i - 1], spoken[j - 1]))
                i -= 1
                j -= 1
                continue
        if i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            ops.append(AlignmentOp.deletion(original[i - 1]))
            i -= 1
        else:
            # dp is built from these three moves, so insertion must hold here
            ops.append(AlignmentOp.insertion(spoken[j - 1]))
            j -= 1
    ops.reverse()
    return ops
