from typing import Any, List, Sequence


def rank(scores: Sequence[float], order_keys: Sequence[Any]) -> List[int]:
    """Return 1-based ranks aligned with ``scores``.

    Higher score ranks first; equal scores fall back to ascending
    ``order_keys`` (document position), so the result never depends on
    sort stability.
    """
    if len(scores) != len(order_keys):
        raise ValueError("scores and order_keys must have the same length")
    order = sorted(range(len(scores)), key=lambda i: (-scores[i], order_keys[i]))
    ranks = [0] * len(scores)
    for position, i in enumerate(order, start=1):
        ranks[i] = position
    return ranks
