"""Sentence-level cross-document matching.

Every sentence of every document is one member of a single shared corpus:
the IDF is computed once over the union of all sentences, not per document.
Sentences are then compared pairwise across documents, giving

* matches: sentence pairs whose cosine similarity reaches the threshold;
* global similarities: per document pair, the mean similarity over the full
  cross product of their sentences (not only the matching ones).

Both lists come back sorted by score, highest first. Equal scores keep the
order in which the pairs were generated (flattened sentence order for
matches, document order for global similarities).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from docsim.features.idf import compute_idf
from docsim.features.tf import compute_tf
from docsim.representations.similarity import sparse_cosine_similarity
from docsim.representations.vectorize import tfidf_vector
from docsim.utils.parallel import parallel_map
from docsim.utils.text import normalize_text
from docsim.utils.tokenizer import tokenize

from .types import GlobalSimilarity, SentenceDocument, SentenceMatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentenceVector:
    doc_index: int
    sentence_index: int
    vector: Mapping[str, float]


def flatten_sentences(documents: Sequence[SentenceDocument]) -> List[Tuple[int, int, str]]:
    """(doc index, sentence index, text) triples in document then sentence order."""
    return [
        (doc_idx, sent_idx, sentence)
        for doc_idx, doc in enumerate(documents)
        for sent_idx, sentence in enumerate(doc.sentences)
    ]


def build_sentence_vectors(
    documents: Sequence[SentenceDocument], n_jobs: Optional[int] = 1
) -> List[SentenceVector]:
    triples = flatten_sentences(documents)
    if not triples:
        return []

    tokens = parallel_map(lambda t: tokenize(normalize_text(t[2])), triples, n_jobs=n_jobs)
    tfs = parallel_map(compute_tf, tokens, n_jobs=n_jobs)

    # Barrier: one IDF across all sentences of all documents.
    idf = compute_idf(tfs)
    logger.debug("Sentence corpus: %d sentences, %d terms", len(triples), len(idf))

    weights = parallel_map(lambda tf: tfidf_vector(tf, idf), tfs, n_jobs=n_jobs)
    return [
        SentenceVector(doc_index=d, sentence_index=s, vector=w)
        for (d, s, _), w in zip(triples, weights)
    ]


def _cross_document_row(i: int, vectors: Sequence[SentenceVector]) -> List[Tuple[int, float]]:
    """Similarity of sentence i to every later sentence from another document."""
    vec_a = vectors[i]
    row: List[Tuple[int, float]] = []
    for j in range(i + 1, len(vectors)):
        vec_b = vectors[j]
        if vec_a.doc_index == vec_b.doc_index:
            continue
        row.append((j, sparse_cosine_similarity(vec_a.vector, vec_b.vector)))
    return row


def pairwise_similarities(
    vectors: Sequence[SentenceVector], n_jobs: Optional[int] = 1
) -> List[List[Tuple[int, float]]]:
    return parallel_map(lambda i: _cross_document_row(i, vectors), range(len(vectors)), n_jobs=n_jobs)


def compute_sentence_matches(
    vectors: Sequence[SentenceVector],
    rows: Sequence[Sequence[Tuple[int, float]]],
    documents: Sequence[SentenceDocument],
    threshold: float,
) -> List[SentenceMatch]:
    matches: List[SentenceMatch] = []
    for i, row in enumerate(rows):
        src = vectors[i]
        src_doc = documents[src.doc_index]
        for j, similarity in row:
            if similarity < threshold:
                continue
            tgt = vectors[j]
            tgt_doc = documents[tgt.doc_index]
            matches.append(
                SentenceMatch(
                    source_doc=src_doc.filename,
                    source_sentence_index=src.sentence_index,
                    source_sentence=src_doc.sentences[src.sentence_index],
                    target_doc=tgt_doc.filename,
                    target_sentence_index=tgt.sentence_index,
                    target_sentence=tgt_doc.sentences[tgt.sentence_index],
                    similarity=similarity,
                )
            )
    return sorted(matches, key=lambda m: m.similarity, reverse=True)


def compute_global_similarities(
    vectors: Sequence[SentenceVector],
    rows: Sequence[Sequence[Tuple[int, float]]],
    documents: Sequence[SentenceDocument],
) -> List[GlobalSimilarity]:
    # Flattened order is document order, so doc_index(i) < doc_index(j) for i < j.
    totals: Dict[Tuple[int, int], float] = {}
    counts: Dict[Tuple[int, int], int] = {}
    for i, row in enumerate(rows):
        doc_a = vectors[i].doc_index
        for j, similarity in row:
            key = (doc_a, vectors[j].doc_index)
            totals[key] = totals.get(key, 0.0) + similarity
            counts[key] = counts.get(key, 0) + 1

    out: List[GlobalSimilarity] = []
    n = len(documents)
    for a in range(n):
        for b in range(a + 1, n):
            # Pairs involving a document without sentences never get a count.
            if (a, b) not in counts:
                continue
            out.append(
                GlobalSimilarity(
                    doc_a=documents[a].filename,
                    doc_b=documents[b].filename,
                    score=totals[(a, b)] / counts[(a, b)],
                )
            )
    return sorted(out, key=lambda g: g.score, reverse=True)


def analyze_sentence_similarity(
    documents: Sequence[SentenceDocument],
    threshold: float,
    n_jobs: Optional[int] = 1,
) -> Tuple[List[SentenceMatch], List[GlobalSimilarity]]:
    """Match sentences across *documents* and score every document pair.

    Parameters
    ----------
    documents : sequence of SentenceDocument
        Labelled, already-split documents; order defines sentence indices.
    threshold : float
        Minimum similarity (inclusive) for a sentence pair to be reported.
    n_jobs : int, optional
        joblib-style worker count for the per-sentence stages.

    Returns
    -------
    matches : list of SentenceMatch
    global_similarity : list of GlobalSimilarity
    """
    vectors = build_sentence_vectors(documents, n_jobs=n_jobs)
    if not vectors:
        return [], []

    rows = pairwise_similarities(vectors, n_jobs=n_jobs)
    matches = compute_sentence_matches(vectors, rows, documents, threshold)
    global_similarity = compute_global_similarities(vectors, rows, documents)
    logger.debug(
        "Sentence analysis: %d docs, %d sentences, %d matches at threshold %.2f",
        len(documents),
        len(vectors),
        len(matches),
        threshold,
    )
    return matches, global_similarity
