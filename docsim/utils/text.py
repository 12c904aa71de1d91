from __future__ import annotations

import string

# ASCII punctuation becomes a space, ASCII letters are lowercased.
# Everything else (including non-ASCII letters) is left untouched.
_NORMALIZE_TABLE = str.maketrans(
    {
        **{ch: " " for ch in string.punctuation},
        **{ch: ch.lower() for ch in string.ascii_uppercase},
    }
)


def normalize_text(text: str) -> str:
    """Lowercase ASCII letters, blank out ASCII punctuation and collapse whitespace.

    Non-ASCII characters pass through unchanged and are not case-folded, so
    ``normalize_text("Ünïcode, WORLD!")`` gives ``"Ünïcode world"``.
    Empty or all-punctuation input yields ``""``. The function is idempotent.
    """
    if not text:
        return ""
    return " ".join(text.translate(_NORMALIZE_TABLE).split())
