from __future__ import annotations

import math

import pytest

from docsim.features.idf import compute_idf, document_frequency
from docsim.features.tf import compute_tf
from docsim.utils.text import normalize_text
from docsim.utils.tokenizer import tokenize


def test_tf_relative_frequency():
    tf = compute_tf(["a", "b", "a"])
    assert tf["a"] == pytest.approx(2 / 3)
    assert tf["b"] == pytest.approx(1 / 3)


def test_tf_sums_to_one():
    tokens = tokenize(normalize_text("The cat sat on the mat, and the cat slept."))
    tf = compute_tf(tokens)
    assert math.fsum(tf.values()) == pytest.approx(1.0)
    assert all(0.0 <= v <= 1.0 for v in tf.values())


def test_tf_empty():
    assert compute_tf([]) == {}


def test_document_frequency_counts_presence_only():
    tfs = [compute_tf(["a", "a", "a", "b"]), compute_tf(["a"]), compute_tf(["c"])]
    df = document_frequency(tfs)
    assert df["a"] == 2
    assert df["b"] == 1
    assert df["c"] == 1


def test_idf_smoothed_formula():
    idf = compute_idf([{"hello": 0.5}, {"world": 0.5}])
    expected = math.log(3 / 2) + 1
    assert idf["hello"] == pytest.approx(expected)
    assert idf["world"] == pytest.approx(expected)


def test_idf_term_in_every_document_is_one():
    idf = compute_idf([{"x": 1.0}, {"x": 0.5, "y": 0.5}, {"x": 1.0}])
    assert idf["x"] == pytest.approx(1.0)


def test_idf_positive_and_monotone():
    tfs = [
        compute_tf(["common", "rare"]),
        compute_tf(["common", "mid"]),
        compute_tf(["common", "mid"]),
    ]
    idf = compute_idf(tfs)
    assert all(v > 0 for v in idf.values())
    assert idf["rare"] >= idf["mid"] >= idf["common"]
    assert set(idf) == {"common", "rare", "mid"}


def test_idf_empty_corpus():
    assert compute_idf([]) == {}
