import argparse
import random
import time
from typing import List

from docsim.pipeline.document_pipeline import analyze_documents
from docsim.pipeline.sentence_pipeline import analyze_sentence_similarity
from docsim.pipeline.types import SentenceDocument
from docsim.utils.io import write_json
from docsim.utils.text import normalize_text
from docsim.utils.tokenizer import count_tokens

WORDS = (
    "the quick brown fox jumps over lazy dog machine learning data science "
    "artificial intelligence neural network document similarity vector cosine "
    "frequency corpus sentence analysis model feature weight token text"
).split()


def make_sentence(rng: random.Random, n_words: int) -> str:
    return " ".join(rng.choice(WORDS) for _ in range(n_words)).capitalize() + "."


def make_documents(rng: random.Random, n_docs: int, n_sentences: int) -> List[SentenceDocument]:
    return [
        SentenceDocument(
            filename=f"doc{i}.txt",
            sentences=[make_sentence(rng, rng.randint(5, 15)) for _ in range(n_sentences)],
        )
        for i in range(n_docs)
    ]


def timed(fn, repeat: int) -> float:
    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - t0)
    return best * 1000.0


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--sizes", default="2,5,10,50", help="comma-separated document counts")
    ap.add_argument("--sentences", type=int, default=20, help="sentences per document")
    ap.add_argument("--threshold", type=float, default=0.7)
    ap.add_argument("--n-jobs", type=int, default=1)
    ap.add_argument("--repeat", type=int, default=3)
    ap.add_argument("--seed", type=int, default=2024)
    ap.add_argument("--out", default=None, help="optional JSON output path")
    args = ap.parse_args()

    rng = random.Random(args.seed)
    sizes = [int(s) for s in args.sizes.split(",") if s.strip()]
    rows = []
    print(f"{'docs':>6} {'sentences':>10} {'matrix_ms':>10} {'sentence_ms':>12} {'tokens':>8}")
    for n in sizes:
        docs = make_documents(rng, n, args.sentences)
        texts = [" ".join(d.sentences) for d in docs]
        matrix_ms = timed(lambda: analyze_documents(texts, n_jobs=args.n_jobs), args.repeat)
        sentence_ms = timed(
            lambda: analyze_sentence_similarity(docs, args.threshold, n_jobs=args.n_jobs),
            args.repeat,
        )
        total = n * args.sentences
        tokens = sum(count_tokens(normalize_text(t)) for t in texts)
        print(f"{n:>6} {total:>10} {matrix_ms:>10.2f} {sentence_ms:>12.2f} {tokens:>8}")
        rows.append(
            {
                "documents": n,
                "sentences": total,
                "tokens": tokens,
                "matrix_ms": matrix_ms,
                "sentence_ms": sentence_ms,
            }
        )

    if args.out:
        write_json(args.out, {"n_jobs": args.n_jobs, "results": rows})
        print(f"Wrote benchmark results to {args.out}")


if __name__ == "__main__":
    main()
