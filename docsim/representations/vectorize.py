from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

import numpy as np


def build_vocabulary(idf: Mapping[str, float]) -> List[str]:
    """Sorted, deduplicated terms of *idf*; fixes the dense dimension order."""
    return sorted(idf)


def vectorize(
    tf: Mapping[str, float],
    idf: Mapping[str, float],
    vocabulary: Sequence[str],
) -> np.ndarray:
    """Dense TF-IDF vector laid out along *vocabulary*.

    Position i holds tf(term_i) * idf(term_i); terms missing from either map
    contribute 0.0. The result always has ``len(vocabulary)`` entries.
    """
    return np.fromiter(
        (tf.get(term, 0.0) * idf.get(term, 0.0) for term in vocabulary),
        dtype=np.float64,
        count=len(vocabulary),
    )


def tfidf_vector(tf: Mapping[str, float], idf: Mapping[str, float]) -> Dict[str, float]:
    """Sparse TF-IDF map restricted to the keys of *tf*."""
    return {term: weight * idf.get(term, 0.0) for term, weight in tf.items()}
