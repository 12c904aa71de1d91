from __future__ import annotations

from typing import Callable, Iterable, List, Optional, TypeVar

from joblib import Parallel, delayed

T = TypeVar("T")
R = TypeVar("R")


def parallel_map(fn: Callable[[T], R], items: Iterable[T], n_jobs: Optional[int] = 1) -> List[R]:
    """Map *fn* over *items*, preserving input order in the result.

    ``n_jobs`` follows joblib semantics (``None`` or 1 runs serially, -1 uses
    all cores). Workers are threads so shared read-only inputs (IDF map,
    vocabulary) are not copied.
    """
    items = list(items)
    if n_jobs in (None, 1) or len(items) <= 1:
        return [fn(x) for x in items]
    return Parallel(n_jobs=n_jobs, prefer="threads")(delayed(fn)(x) for x in items)
