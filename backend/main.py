from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, File, Form, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from docsim.config import AppConfig, load_config
from docsim.utils.logging import setup_logging

from .errors import AnalysisError
from .models import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    SentenceAnalysisResponse,
    UploadedFile,
)
from .service import SimilarityService


logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, code: str) -> JSONResponse:
    body = ErrorResponse(error=message, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or load_config()
    setup_logging(config.logging.level)

    app = FastAPI(
        title="Document Similarity API",
        version="0.1.0",
        description="TF-IDF cosine similarity between documents and their sentences",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    service = SimilarityService(config)
    app.state.service = service

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/analyze", response_model=AnalyzeResponse)
    def analyze(request: AnalyzeRequest):
        try:
            return service.analyze(request)
        except AnalysisError as exc:
            logger.warning("Bad request: %s", exc)
            return _error(exc.status_code, str(exc), exc.code)
        except Exception:  # pragma: no cover - unexpected failures
            logger.exception("Unexpected error during document analysis")
            return _error(500, "Document analysis failed", "INTERNAL_ERROR")

    @app.post("/api/analyze", response_model=SentenceAnalysisResponse)
    async def analyze_files(
        files: Optional[List[UploadFile]] = File(None),
        threshold: Optional[str] = Form(None),
    ):
        try:
            value = service.parse_threshold(threshold)
            uploads = [
                UploadedFile(filename=f.filename or "", data=await f.read())
                for f in (files or [])
            ]
            return await run_in_threadpool(service.analyze_files, uploads, value)
        except AnalysisError as exc:
            logger.warning("Rejected upload: %s", exc)
            return _error(exc.status_code, str(exc), exc.code)
        except Exception:  # pragma: no cover - unexpected failures
            logger.exception("Unexpected error during sentence analysis")
            return _error(500, "Sentence analysis failed", "INTERNAL_ERROR")

    return app


app = create_app()


__all__ = ["app", "create_app"]
