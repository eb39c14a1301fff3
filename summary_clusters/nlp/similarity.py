import math
from enum import Enum
from typing import Mapping

import numpy as np

from summary_clusters.nlp.vectorize import Vocabulary


class Direction(str, Enum):
    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"

    def better(self, candidate: float, best: float) -> bool:
        # strict, so on ties the earlier centroid keeps the document
        if self is Direction.MAXIMIZE:
            return candidate > best
        return candidate < best


class Metric(str, Enum):
    COSINE = "cosine"
    EUCLIDEAN = "euclidean"

    @property
    def direction(self) -> Direction:
        return Direction.MAXIMIZE if self is Metric.COSINE else Direction.MINIMIZE

    @classmethod
    def parse(cls, value) -> "Metric":
        if isinstance(value, Metric):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            raise ValueError(f"unknown similarity metric {value!r} (expected cosine|euclidean)") from None


def cosine_similarity(sample: Mapping[str, int], centroid: np.ndarray, vocabulary: Vocabulary) -> float:
    """
    Cosine between a sparse document vector and a dense centroid.
    The dot product only visits the sample's tokens; the centroid norm covers
    the whole vocabulary. Returns 0.0 when either vector has zero length.
    """
    sample_norm = math.sqrt(sum(c * c for c in sample.values()))
    centroid_norm = float(np.linalg.norm(centroid))
    if sample_norm == 0.0 or centroid_norm == 0.0:
        return 0.0
    dot = sum(c * float(centroid[vocabulary.index[t]]) for t, c in sample.items())
    return dot / (sample_norm * centroid_norm)


def euclidean_distance(sample: Mapping[str, int], centroid: np.ndarray, vocabulary: Vocabulary) -> float:
    """
    Distance over the sample's own tokens only. Vocabulary tokens missing from
    the sample contribute nothing, so this is a partial distance.
    """
    total = 0.0
    for t, c in sample.items():
        diff = c - float(centroid[vocabulary.index[t]])
        total += diff * diff
    return math.sqrt(total)


def score(metric: Metric, sample: Mapping[str, int], centroid: np.ndarray, vocabulary: Vocabulary) -> float:
    if metric is Metric.EUCLIDEAN:
        return euclidean_distance(sample, centroid, vocabulary)
    return cosine_similarity(sample, centroid, vocabulary)
