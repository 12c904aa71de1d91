import re
from typing import Iterable, List, Tuple

from docsim.pipeline.types import SentenceDocument


# Sentence boundary: . ! or ? followed by whitespace (newlines included) or
# the end of the text. The mark stays with its sentence. Abbreviations such
# as "Tn. Budi" are not special-cased.
_BOUNDARY_REGEX = re.compile(r"[.!?](?:\s+|\Z)")


def split_sentences(text: str) -> List[str]:
    text = text or ""
    if not text.strip():
        return []
    sentences: List[str] = []
    last_end = 0
    for m in _BOUNDARY_REGEX.finditer(text):
        sent = text[last_end : m.start() + 1].strip()
        if sent:
            sentences.append(sent)
        last_end = m.end()
    tail = text[last_end:].strip()
    if tail:
        sentences.append(tail)
    return sentences


def build_sentence_documents(named_texts: Iterable[Tuple[str, str]]) -> List[SentenceDocument]:
    """Pair each (filename, text) with its split sentences, keeping input order."""
    return [SentenceDocument(filename=name, sentences=split_sentences(text)) for name, text in named_texts]
