from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from docsim.pipeline.types import GlobalSimilarity, SentenceMatch, SimilarityMatrix


class AnalyzeRequest(BaseModel):
    documents: List[str] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    similarity_matrix: List[List[float]]
    index: List[str]

    @classmethod
    def from_matrix(cls, result: SimilarityMatrix) -> "AnalyzeResponse":
        return cls(similarity_matrix=result.matrix.tolist(), index=list(result.index))


class AnalysisMetadata(BaseModel):
    documents_count: int
    total_sentences: int
    processing_time_ms: int
    threshold: float


class SentenceMatchModel(BaseModel):
    source_doc: str
    source_sentence_index: int
    source_sentence: str
    target_doc: str
    target_sentence_index: int
    target_sentence: str
    similarity: float

    @classmethod
    def from_match(cls, match: SentenceMatch) -> "SentenceMatchModel":
        return cls(**match.to_dict())


class GlobalSimilarityModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    doc_a: str = Field(alias="docA")
    doc_b: str = Field(alias="docB")
    score: float

    @classmethod
    def from_global(cls, item: GlobalSimilarity) -> "GlobalSimilarityModel":
        return cls(doc_a=item.doc_a, doc_b=item.doc_b, score=item.score)


class SentenceAnalysisResponse(BaseModel):
    metadata: AnalysisMetadata
    matches: List[SentenceMatchModel] = Field(default_factory=list)
    global_similarity: List[GlobalSimilarityModel] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    code: str


class UploadedFile(BaseModel):
    """A file received from the client, already read into memory."""

    filename: str
    data: bytes
