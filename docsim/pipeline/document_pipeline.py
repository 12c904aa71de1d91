"""Whole-document similarity: N documents in, N x N cosine matrix out."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from docsim.features.idf import compute_idf
from docsim.features.tf import compute_tf
from docsim.representations.similarity import cosine_similarity_matrix
from docsim.representations.tfidf_helper import sklearn_similarity_matrix
from docsim.representations.vectorize import build_vocabulary, vectorize
from docsim.utils.parallel import parallel_map
from docsim.utils.text import normalize_text
from docsim.utils.tokenizer import tokenize

from .types import SimilarityMatrix

logger = logging.getLogger(__name__)

ENGINES = ("native", "sklearn")


def document_labels(n: int) -> List[str]:
    return [f"doc{i}" for i in range(n)]


def _native_matrix(documents: Sequence[str], n_jobs: Optional[int]) -> np.ndarray:
    # Per-document stages; order-independent, results keep input order.
    normalized = parallel_map(normalize_text, documents, n_jobs=n_jobs)
    tokenized = parallel_map(tokenize, normalized, n_jobs=n_jobs)
    tfs = parallel_map(compute_tf, tokenized, n_jobs=n_jobs)

    # Barrier: IDF needs every TF map.
    idf = compute_idf(tfs)
    vocabulary = build_vocabulary(idf)
    logger.debug("Document corpus: %d docs, %d terms", len(documents), len(vocabulary))

    vectors = parallel_map(lambda tf: vectorize(tf, idf, vocabulary), tfs, n_jobs=n_jobs)
    return cosine_similarity_matrix(vectors, n_jobs=n_jobs)


def analyze_documents(
    documents: Sequence[str],
    n_jobs: Optional[int] = 1,
    engine: str = "native",
) -> SimilarityMatrix:
    """Compute the pairwise TF-IDF cosine similarity of *documents*.

    Labels are ``doc0``, ``doc1``, ... in input order. An empty input returns
    an empty matrix without doing any work.
    """
    if not documents:
        return SimilarityMatrix(matrix=np.zeros((0, 0)), index=[])
    if engine not in ENGINES:
        raise ValueError(f"Unknown similarity engine: {engine}")

    if engine == "sklearn":
        matrix = sklearn_similarity_matrix(documents)
    else:
        matrix = _native_matrix(documents, n_jobs)
    return SimilarityMatrix(matrix=matrix, index=document_labels(len(documents)))
