from __future__ import annotations

import pytest

from docsim.data.preprocess import build_sentence_documents, split_sentences
from docsim.utils.text import normalize_text
from docsim.utils.tokenizer import count_tokens, tokenize


class TestNormalize:
    def test_lowercase_and_punctuation(self):
        assert normalize_text("Hello, World!") == "hello world"

    def test_collapses_whitespace(self):
        assert normalize_text("  Multiple   spaces\n\tand\ttabs  ") == "multiple spaces and tabs"

    def test_punctuation_becomes_space(self):
        assert normalize_text("don't-stop") == "don t stop"

    def test_empty_and_punctuation_only(self):
        assert normalize_text("") == ""
        assert normalize_text("!!!...,,,") == ""
        assert normalize_text("   ") == ""

    def test_non_ascii_untouched(self):
        assert normalize_text("Ünïcode ÀB") == "Ünïcode Àb"

    @pytest.mark.parametrize(
        "text",
        ["Hello, World!", "  a  B\tc ", "Ünïcode, ÀB!", "...", "x--y__z", ""],
    )
    def test_idempotent(self, text):
        once = normalize_text(text)
        assert normalize_text(once) == once


class TestTokenize:
    def test_basic(self):
        assert tokenize("hello world foo") == ["hello", "world", "foo"]

    def test_preserves_order_and_duplicates(self):
        assert tokenize("b a b") == ["b", "a", "b"]

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_count_tokens(self):
        assert count_tokens("one two  three") == 3


class TestSplitSentences:
    def test_basic(self):
        sents = split_sentences("Hello world. How are you? I am fine!")
        assert sents == ["Hello world.", "How are you?", "I am fine!"]

    def test_single_and_no_punctuation(self):
        assert split_sentences("This is a single sentence.") == ["This is a single sentence."]
        assert split_sentences("No punctuation here") == ["No punctuation here"]

    def test_empty(self):
        assert split_sentences("") == []
        assert split_sentences("   \n  \t  ") == []

    def test_multiple_spaces(self):
        sents = split_sentences("First sentence.    Second sentence!     Third.")
        assert sents == ["First sentence.", "Second sentence!", "Third."]

    def test_newlines(self):
        assert len(split_sentences("First line.\nSecond line.\n\nThird line.")) == 3

    def test_abbreviation_is_split(self):
        assert len(split_sentences("Tn. Budi pergi. Dia senang.")) >= 2

    def test_decimal_point_does_not_split(self):
        assert split_sentences("Pi is 3.14 today.") == ["Pi is 3.14 today."]

    def test_build_sentence_documents(self):
        docs = build_sentence_documents([("a.txt", "One. Two."), ("b.txt", "")])
        assert [d.filename for d in docs] == ["a.txt", "b.txt"]
        assert docs[0].sentences == ["One.", "Two."]
        assert docs[1].sentences == []
