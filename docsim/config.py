from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from docsim.utils.io import load_yaml

ROOT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG = ROOT_DIR / "configs/default.yaml"


class LimitsConfig(BaseModel):
    max_documents: int = Field(default=100, ge=1)
    min_documents: int = Field(default=2, ge=1)
    max_document_length: int = Field(default=50_000, ge=1)
    max_files: int = Field(default=5, ge=1)
    min_files: int = Field(default=2, ge=1)
    max_file_size: int = Field(default=10 * 1024 * 1024, ge=1)
    max_total_size: int = Field(default=50 * 1024 * 1024, ge=1)

    @model_validator(mode="after")
    def validate_bounds(self) -> "LimitsConfig":
        if self.min_documents > self.max_documents:
            raise ValueError("min_documents must not exceed max_documents")
        if self.min_files > self.max_files:
            raise ValueError("min_files must not exceed max_files")
        return self


class AnalysisConfig(BaseModel):
    default_threshold: float = Field(default=0.70, ge=0.0, le=1.0)
    n_jobs: int = 1
    engine: Literal["native", "sklearn"] = "native"


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)


class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Optional[str] = None) -> AppConfig:
    """Load the YAML config from *path*, ``$DOCSIM_CONFIG`` or the bundled default.

    Missing sections keep their defaults; ``$PORT`` overrides ``server.port``.
    """
    cfg_path = path or os.environ.get("DOCSIM_CONFIG")
    if cfg_path:
        data = load_yaml(cfg_path)
    elif DEFAULT_CONFIG.exists():
        data = load_yaml(str(DEFAULT_CONFIG))
    else:
        data = {}

    port = os.environ.get("PORT")
    if port:
        data.setdefault("server", {})["port"] = port
    return AppConfig.model_validate(data)
