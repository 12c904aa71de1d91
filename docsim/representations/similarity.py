from __future__ import annotations

import math
from typing import Mapping, Optional, Sequence, Union

import numpy as np

from docsim.utils.parallel import parallel_map

DenseVector = Union[np.ndarray, Sequence[float]]


def cosine_similarity(vec_a: DenseVector, vec_b: DenseVector) -> float:
    """Cosine similarity of two dense vectors.

    Vectors of different length, empty vectors and zero-magnitude vectors all
    score 0.0 instead of raising.
    """
    a = np.asarray(vec_a, dtype=np.float64)
    b = np.asarray(vec_b, dtype=np.float64)
    if a.size == 0 or a.shape != b.shape:
        return 0.0
    norm_a = float(np.linalg.norm(a))
    norm_b = float(np.linalg.norm(b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return float(np.dot(a, b)) / (norm_a * norm_b)


def sparse_cosine_similarity(vec_a: Mapping[str, float], vec_b: Mapping[str, float]) -> float:
    """Cosine similarity of two term->weight maps.

    The dot product runs over shared terms only; each magnitude runs over its
    own map. Sums use ``math.fsum`` so the result does not depend on dict
    iteration order.
    """
    if not vec_a or not vec_b:
        return 0.0
    if len(vec_b) < len(vec_a):
        small, large = vec_b, vec_a
    else:
        small, large = vec_a, vec_b
    dot = math.fsum(w * large[t] for t, w in small.items() if t in large)
    norm_a = math.sqrt(math.fsum(w * w for w in vec_a.values()))
    norm_b = math.sqrt(math.fsum(w * w for w in vec_b.values()))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return dot / (norm_a * norm_b)


def cosine_similarity_matrix(vectors: Sequence[DenseVector], n_jobs: Optional[int] = 1) -> np.ndarray:
    """N x N cosine similarity matrix, computed row by row.

    The diagonal is set to exactly 1.0 rather than measured. Both triangles
    are computed; cosine is commutative so the result is symmetric.
    """
    n = len(vectors)
    if n == 0:
        return np.zeros((0, 0))

    def _row(i: int) -> list:
        return [1.0 if i == j else cosine_similarity(vectors[i], vectors[j]) for j in range(n)]

    rows = parallel_map(_row, range(n), n_jobs=n_jobs)
    return np.asarray(rows, dtype=np.float64)
