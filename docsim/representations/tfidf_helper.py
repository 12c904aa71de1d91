"""scikit-learn rendition of the document similarity matrix.

``TfidfVectorizer`` with ``smooth_idf=True`` uses the same smoothed IDF as
:func:`docsim.features.idf.compute_idf`. It weights raw counts instead of
relative frequencies, which scales each document vector by a constant and
leaves cosine similarity unchanged. Text goes through the same normalizer and
tokenizer as the native pipeline, so both engines agree within float
tolerance.
"""

from typing import Sequence

import numpy as np

from docsim.utils.text import normalize_text
from docsim.utils.tokenizer import tokenize


def sklearn_similarity_matrix(documents: Sequence[str]) -> np.ndarray:
    """Return the N x N similarity matrix computed with scikit-learn.

    Parameters
    ----------
    documents : sequence of str
        Raw document texts.

    Returns
    -------
    sim : ndarray, shape (N, N)
        Pairwise cosine similarity with an exact 1.0 diagonal.
    """
    from sklearn.feature_extraction.text import TfidfVectorizer
    from sklearn.metrics.pairwise import cosine_similarity

    n = len(documents)
    if n == 0:
        return np.zeros((0, 0))

    normalized = [normalize_text(d) for d in documents]
    if not any(normalized):
        # TfidfVectorizer refuses an empty vocabulary; every pair scores 0.0.
        return np.eye(n)

    X = TfidfVectorizer(
        lowercase=False,
        tokenizer=tokenize,
        token_pattern=None,
        smooth_idf=True,
        sublinear_tf=False,
        norm=None,
    ).fit_transform(normalized)

    sim = cosine_similarity(X)
    np.fill_diagonal(sim, 1.0)
    return sim
