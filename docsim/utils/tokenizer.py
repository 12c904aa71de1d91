from typing import List


def tokenize(text: str) -> List[str]:
    """Split normalized *text* into its whitespace-delimited tokens, in order."""
    return (text or "").split()


def count_tokens(text: str) -> int:
    """Count whitespace-delimited tokens in *text*."""
    return len(tokenize(text))
