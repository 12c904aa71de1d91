from __future__ import annotations

from collections import Counter
from typing import Dict, List


def compute_tf(tokens: List[str]) -> Dict[str, float]:
    """Relative term frequency: count(term) / total tokens.

    Returns an empty map for an empty token list.
    """
    if not tokens:
        return {}
    total = float(len(tokens))
    counts = Counter(tokens)
    return {term: c / total for term, c in counts.items()}
