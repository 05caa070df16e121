import math
from typing import List, Sequence

from .text_utils import TermStatistics


def sentence_scores(stats: TermStatistics, min_frequency: int = 1) -> List[float]:
    """Score each sentence by the document frequency of its distinct terms.

    score = sum(freq(t) for distinct significant t in sentence) / total
    occurrences of significant terms. Terms seen fewer than ``min_frequency``
    times in the document contribute nothing. The numerator is an integer so
    sentences with the same term mix get identical scores.
    """
    total = stats.total
    if not total:
        return [0.0 for _ in range(len(stats))]
    scores: List[float] = []
    for terms in stats.sentence_terms:
        hits = 0
        for t in terms:
            f = stats.frequency(t)
            if f >= min_frequency:
                hits += f
        scores.append(hits / total)
    return scores


def paragraph_scores(scores: Sequence[float], paragraph_sizes: Sequence[int]) -> List[float]:
    """Mean sentence score per paragraph; ``paragraph_sizes`` slices ``scores`` in order."""
    out: List[float] = []
    pos = 0
    for size in paragraph_sizes:
        chunk = scores[pos: pos + size]
        pos += size
        out.append(math.fsum(chunk) / len(chunk) if chunk else 0.0)
    return out
