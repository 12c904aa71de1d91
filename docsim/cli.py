import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from docsim.config import load_config
from docsim.data.extraction import ExtractionError, FileType, extract_text
from docsim.data.preprocess import build_sentence_documents
from docsim.pipeline.document_pipeline import analyze_documents
from docsim.pipeline.sentence_pipeline import analyze_sentence_similarity
from docsim.utils.io import write_json
from docsim.utils.logging import setup_logging

log = logging.getLogger("docsim.cli")


def read_documents(paths: List[str]) -> List[Tuple[str, str]]:
    """Return (filename, text) for each path, extracting PDF/DOCX/TXT content."""
    out: List[Tuple[str, str]] = []
    for p in paths:
        path = Path(p)
        file_type = FileType.from_filename(path.name)
        if file_type is None:
            raise ValueError(f"Unsupported file type: {path.name}. Allowed: PDF, DOCX, TXT")
        out.append((path.name, extract_text(path.read_bytes(), file_type)))
    return out


def run_matrix(args, cfg) -> dict:
    docs = read_documents(args.files)
    result = analyze_documents(
        [text for _, text in docs],
        n_jobs=args.n_jobs if args.n_jobs is not None else cfg.analysis.n_jobs,
        engine=cfg.analysis.engine,
    )
    payload = result.to_dict()
    payload["files"] = [name for name, _ in docs]
    return payload


def run_sentences(args, cfg) -> dict:
    threshold = args.threshold if args.threshold is not None else cfg.analysis.default_threshold
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Threshold {threshold} out of range. Must be between 0.0 and 1.0")
    documents = build_sentence_documents(read_documents(args.files))
    matches, global_similarity = analyze_sentence_similarity(
        documents,
        threshold,
        n_jobs=args.n_jobs if args.n_jobs is not None else cfg.analysis.n_jobs,
    )
    return {
        "threshold": threshold,
        "matches": [m.to_dict() for m in matches],
        "global_similarity": [g.to_dict() for g in global_similarity],
    }


def run_serve(args, cfg) -> None:
    import uvicorn

    if args.config:
        # backend.main builds its app from $DOCSIM_CONFIG at import time
        os.environ["DOCSIM_CONFIG"] = args.config
    uvicorn.run(
        "backend.main:app",
        host=args.host or cfg.server.host,
        port=args.port or cfg.server.port,
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="docsim", description="TF-IDF document similarity")
    ap.add_argument("--config", default=None, help="path to YAML config")
    ap.add_argument("--log-level", default=None, help="override logging.level from config")
    sub = ap.add_subparsers(dest="command", required=True)

    p_matrix = sub.add_parser("matrix", help="whole-document similarity matrix")
    p_matrix.add_argument("files", nargs="+")
    p_matrix.add_argument("--n-jobs", type=int, default=None)
    p_matrix.add_argument("--out", default=None, help="write JSON here instead of stdout")

    p_sent = sub.add_parser("sentences", help="cross-document sentence matching")
    p_sent.add_argument("files", nargs="+")
    p_sent.add_argument("--threshold", type=float, default=None)
    p_sent.add_argument("--n-jobs", type=int, default=None)
    p_sent.add_argument("--out", default=None, help="write JSON here instead of stdout")

    p_serve = sub.add_parser("serve", help="run the HTTP API")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    cfg = load_config(args.config)
    setup_logging(args.log_level or cfg.logging.level)

    if args.command == "serve":
        run_serve(args, cfg)
        return 0

    runner = run_matrix if args.command == "matrix" else run_sentences
    try:
        payload = runner(args, cfg)
    except (ValueError, ExtractionError, OSError) as e:
        log.error("%s", e)
        return 1

    if args.out:
        write_json(args.out, payload)
        log.info("Wrote %s results to %s", args.command, args.out)
    else:
        json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
