"""Edit distance algorithms for character and word sequences."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..models.aligned_word import AlignmentStep


def levenshtein_distance(a: Sequence, b: Sequence) -> int:
    """Classic Levenshtein distance using a single rolling row.

    Insertion, deletion and substitution each cost 1.

    Args:
        a: First sequence (usually a normalized string)
        b: Second sequence

    Returns:
        Minimum number of edits turning ``a`` into ``b``
    """
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    row = list(range(n + 1))
    for i in range(1, m + 1):
        prev = row[0]  # dp[i-1][j-1]
        row[0] = i
        for j in range(1, n + 1):
            tmp = row[j]
            if a[i - 1] == b[j - 1]:
                row[j] = prev
            else:
                row[j] = min(prev + 1, row[j] + 1, row[j - 1] + 1)
            prev = tmp
    return row[n]


def align_sequences(ref: Sequence[str], hyp: Sequence[str]) -> List[AlignmentStep]:
    """Edit-distance alignment returning the backtracked path of operations.

      match -> equal tokens
      sub -> different tokens at the same position
      del -> reference token not spoken
      ins -> extra spoken token

    When several operations reach the minimum cost at a cell the first one in
    the order (diagonal, del, ins) is kept, so equal-cost alignments always
    resolve the same way.

    Args:
        ref: Reference sequence (normalized tokens)
        hyp: Hypothesis sequence (normalized tokens from ASR)

    Returns:
        List of AlignmentStep from the start of both sequences to the end
    """
    n, m = len(ref), len(hyp)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    back: List[List[Optional[Tuple[str, Optional[int], Optional[int]]]]] = [
        [None] * (m + 1) for _ in range(n + 1)
    ]

    for i in range(1, n + 1):
        dp[i][0] = i
        back[i][0] = ("del", i - 1, None)
    for j in range(1, m + 1):
        dp[0][j] = j
        back[0][j] = ("ins", None, j - 1)

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost_sub = 0 if ref[i - 1] == hyp[j - 1] else 1
            candidates = [
                (dp[i - 1][j - 1] + cost_sub, ("match" if cost_sub == 0 else "sub", i - 1, j - 1)),
                (dp[i - 1][j] + 1, ("del", i - 1, None)),
                (dp[i][j - 1] + 1, ("ins", None, j - 1)),
            ]
            # min() keeps the first of equal-cost candidates
            best_cost, best_step = min(candidates, key=lambda x: x[0])
            dp[i][j] = best_cost
            back[i][j] = best_step

    # backtrack
    steps: List[AlignmentStep] = []
    i, j = n, m
    while i > 0 or j > 0:
        entry = back[i][j]
        if entry is None:
            break
        op, ri, hj = entry
        steps.append(AlignmentStep(op=op, ref_index=ri, hyp_index=hj))
        if op in ("match", "sub"):
            i -= 1
            j -= 1
        elif op == "del":
            i -= 1
        else:
            j -= 1
    steps.reverse()
    return steps


def alignment_cost(steps: Sequence[AlignmentStep]) -> int:
    """Total edit cost of an alignment path (every non-match step costs 1)."""
    return sum(0 if step.is_correct else 1 for step in steps)
