import math

import numpy as np
import pytest

from summary_clusters.nlp.similarity import (
    Direction,
    Metric,
    cosine_similarity,
    euclidean_distance,
    score,
)
from summary_clusters.nlp.vectorize import Vocabulary

VOCAB = Vocabulary.from_tokens(["a", "b", "c"])


def test_cosine_is_one_for_proportional_vectors():
    sim = cosine_similarity({"a": 1, "b": 2}, np.array([2.0, 4.0, 0.0]), VOCAB)
    assert sim == pytest.approx(1.0)


def test_cosine_uses_full_centroid_norm():
    sim = cosine_similarity({"a": 1}, np.array([1.0, 1.0, 0.0]), VOCAB)
    assert sim == pytest.approx(1 / math.sqrt(2))


def test_cosine_stays_in_range():
    assert cosine_similarity({"a": 1}, np.array([-3.0, 0.0, 0.0]), VOCAB) == pytest.approx(-1.0)
    assert -1.0 <= cosine_similarity({"a": 2, "c": 1}, np.array([0.5, 3.0, 1.0]), VOCAB) <= 1.0


def test_cosine_zero_norm_is_zero():
    assert cosine_similarity({}, np.array([1.0, 0.0, 0.0]), VOCAB) == 0.0
    assert cosine_similarity({"a": 1}, np.zeros(3), VOCAB) == 0.0


def test_euclidean_only_compares_sample_tokens():
    assert euclidean_distance({"a": 1}, np.array([1.0, 5.0, 5.0]), VOCAB) == 0.0
    assert euclidean_distance({"a": 3, "b": 1}, np.array([0.0, 1.0, 9.0]), VOCAB) == pytest.approx(3.0)


def test_score_dispatches_on_metric():
    centroid = np.array([1.0, 0.0, 0.0])
    assert score(Metric.COSINE, {"a": 2}, centroid, VOCAB) == pytest.approx(1.0)
    assert score(Metric.EUCLIDEAN, {"a": 2}, centroid, VOCAB) == pytest.approx(1.0)


def test_metric_directions():
    assert Metric.COSINE.direction is Direction.MAXIMIZE
    assert Metric.EUCLIDEAN.direction is Direction.MINIMIZE


def test_direction_is_strict():
    assert Direction.MAXIMIZE.better(0.6, 0.5)
    assert not Direction.MAXIMIZE.better(0.5, 0.5)
    assert Direction.MINIMIZE.better(0.4, 0.5)
    assert not Direction.MINIMIZE.better(0.5, 0.5)


def test_metric_parse():
    assert Metric.parse(" Euclidean ") is Metric.EUCLIDEAN
    assert Metric.parse(Metric.COSINE) is Metric.COSINE
    with pytest.raises(ValueError):
        Metric.parse("manhattan")
