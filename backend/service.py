from __future__ import annotations

import logging
import math
import time
from typing import List, Optional, Sequence

from docsim.config import AppConfig, load_config
from docsim.data.extraction import ExtractionError, FileType, extract_text
from docsim.data.preprocess import split_sentences
from docsim.pipeline.document_pipeline import analyze_documents
from docsim.pipeline.sentence_pipeline import analyze_sentence_similarity
from docsim.pipeline.types import SentenceDocument

from .errors import (
    DocumentTooLongError,
    EmptyDocumentError,
    EmptyFileDocumentError,
    FileExtractionError,
    FileTooLargeError,
    InvalidThresholdError,
    MissingFilenameError,
    NoDocumentsError,
    NotEnoughDocumentsError,
    NotEnoughFilesError,
    ThresholdRangeError,
    TooManyDocumentsError,
    TooManyFilesError,
    TotalSizeTooLargeError,
    UnsupportedFileTypeError,
)
from .models import (
    AnalysisMetadata,
    AnalyzeRequest,
    AnalyzeResponse,
    GlobalSimilarityModel,
    SentenceAnalysisResponse,
    SentenceMatchModel,
    UploadedFile,
)

logger = logging.getLogger(__name__)


class SimilarityService:
    """
    Validates requests and runs the document / sentence similarity pipelines.
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or load_config()

    @property
    def limits(self):
        return self.config.limits

    # --- document-level -------------------------------------------------

    def validate_documents(self, documents: Sequence[str]) -> None:
        limits = self.limits
        if not documents:
            raise NoDocumentsError()
        if len(documents) < limits.min_documents:
            raise NotEnoughDocumentsError(len(documents), limits.min_documents)
        if len(documents) > limits.max_documents:
            raise TooManyDocumentsError(len(documents), limits.max_documents)
        for i, doc in enumerate(documents):
            if not doc.strip():
                raise EmptyDocumentError(i)
            if len(doc.encode("utf-8")) > limits.max_document_length:
                raise DocumentTooLongError(i, limits.max_document_length)

    def analyze(self, request: AnalyzeRequest) -> AnalyzeResponse:
        self.validate_documents(request.documents)
        t0 = time.perf_counter()
        result = analyze_documents(
            request.documents,
            n_jobs=self.config.analysis.n_jobs,
            engine=self.config.analysis.engine,
        )
        logger.info(
            "Analyzed %d documents in %.1f ms",
            len(request.documents),
            (time.perf_counter() - t0) * 1000.0,
        )
        return AnalyzeResponse.from_matrix(result)

    # --- sentence-level -------------------------------------------------

    def parse_threshold(self, raw: Optional[str]) -> float:
        if raw is None or not str(raw).strip():
            return self.config.analysis.default_threshold
        text = str(raw).strip()
        # float() also accepts "0_5" digit grouping
        if "_" in text:
            raise InvalidThresholdError(str(raw))
        try:
            value = float(text)
        except ValueError:
            raise InvalidThresholdError(str(raw)) from None
        if math.isnan(value) or value < 0.0 or value > 1.0:
            raise ThresholdRangeError(value)
        return value

    def validate_uploads(self, files: Sequence[UploadedFile]) -> None:
        limits = self.limits
        total_size = 0
        for count, f in enumerate(files, start=1):
            if not f.filename:
                raise MissingFilenameError()
            if len(f.data) > limits.max_file_size:
                raise FileTooLargeError(f.filename, limits.max_file_size)
            total_size += len(f.data)
            if total_size > limits.max_total_size:
                raise TotalSizeTooLargeError(limits.max_total_size)
            if count > limits.max_files:
                raise TooManyFilesError(limits.max_files)
        if len(files) < limits.min_files:
            raise NotEnoughFilesError(limits.min_files)

    @staticmethod
    def _to_sentence_document(f: UploadedFile) -> SentenceDocument:
        file_type = FileType.from_filename(f.filename)
        if file_type is None:
            raise UnsupportedFileTypeError(f.filename)
        try:
            text = extract_text(f.data, file_type)
        except ExtractionError as exc:
            raise FileExtractionError(f.filename, str(exc)) from exc
        sentences = split_sentences(text)
        if not sentences:
            raise EmptyFileDocumentError(f.filename)
        return SentenceDocument(filename=f.filename, sentences=sentences)

    def analyze_files(self, files: Sequence[UploadedFile], threshold: float) -> SentenceAnalysisResponse:
        t0 = time.perf_counter()
        self.validate_uploads(files)
        documents: List[SentenceDocument] = [self._to_sentence_document(f) for f in files]
        total_sentences = sum(len(d.sentences) for d in documents)

        matches, global_similarity = analyze_sentence_similarity(
            documents,
            threshold,
            n_jobs=self.config.analysis.n_jobs,
        )
        elapsed_ms = int((time.perf_counter() - t0) * 1000)
        logger.info(
            "Sentence analysis of %d files (%d sentences): %d matches in %d ms",
            len(documents),
            total_sentences,
            len(matches),
            elapsed_ms,
        )

        return SentenceAnalysisResponse(
            metadata=AnalysisMetadata(
                documents_count=len(documents),
                total_sentences=total_sentences,
                processing_time_ms=elapsed_ms,
                threshold=threshold,
            ),
            matches=[SentenceMatchModel.from_match(m) for m in matches],
            global_similarity=[GlobalSimilarityModel.from_global(g) for g in global_similarity],
        )
