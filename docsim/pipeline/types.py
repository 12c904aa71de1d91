from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

import numpy as np


@dataclass(frozen=True, eq=False)
class SimilarityMatrix:
    """N x N document similarity matrix plus labels in input order."""

    matrix: np.ndarray
    index: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.index)

    def to_dict(self) -> Dict[str, Any]:
        return {"similarity_matrix": self.matrix.tolist(), "index": list(self.index)}


@dataclass(frozen=True)
class SentenceDocument:
    filename: str
    sentences: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SentenceMatch:
    """Cross-document sentence pair whose similarity met the threshold.

    Source is the pair member that comes first in document order.
    Sentence indices are zero-based positions within their document.
    """

    source_doc: str
    source_sentence_index: int
    source_sentence: str
    target_doc: str
    target_sentence_index: int
    target_sentence: str
    similarity: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GlobalSimilarity:
    """Average sentence similarity between two documents (doc_a before doc_b)."""

    doc_a: str
    doc_b: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {"docA": self.doc_a, "docB": self.doc_b, "score": self.score}
