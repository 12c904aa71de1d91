from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Mapping, Sequence


def document_frequency(tfs: Sequence[Mapping[str, float]]) -> Counter:
    """Number of corpus members whose TF map contains each term (presence only)."""
    df: Counter = Counter()
    for tf in tfs:
        df.update(tf.keys())
    return df


def compute_idf(tfs: Sequence[Mapping[str, float]]) -> Dict[str, float]:
    """Smoothed inverse document frequency over a corpus of TF maps.

    IDF(t) = ln((N + 1) / (df(t) + 1)) + 1, where N is the corpus size and
    df(t) the number of members containing t. Every observed term gets a
    weight > 0. An empty corpus yields an empty map.

    Parameters
    ----------
    tfs : sequence of dict
        One term-frequency map per corpus member (document or sentence).

    Returns
    -------
    dict[str, float]
        Term to IDF weight, for every term appearing in any member.
    """
    if not tfs:
        return {}
    n = len(tfs)
    df = document_frequency(tfs)
    return {term: math.log((n + 1.0) / (count + 1.0)) + 1.0 for term, count in df.items()}
