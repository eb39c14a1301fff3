import logging
import random
from typing import List

import numpy as np

from summary_clusters.errors import DegenerateKError, EmptyCorpusError
from summary_clusters.nlp.vectorize import RunContext

logger = logging.getLogger(__name__)


def zero_centroid(context: RunContext) -> np.ndarray:
    return np.zeros(len(context.vocabulary), dtype="float64")


def initialize_centroids(context: RunContext, k: int, rng=None) -> List[np.ndarray]:
    """
    Seed k dense centroids from k documents drawn with replacement.
    Two centroids may start from the same document.
    rng: anything with randrange(n), e.g. random.Random(seed).
    """
    if not context.documents:
        raise EmptyCorpusError()
    if k < 1:
        raise DegenerateKError(k)
    rng = rng or random.Random()

    centroids = [zero_centroid(context) for _ in range(k)]
    keys = context.documents
    samples = [keys[rng.randrange(len(keys))] for _ in range(k)]
    for centroid, doc in zip(centroids, samples):
        for token, count in context.vectors[doc].items():
            centroid[context.vocabulary.index[token]] += count

    logger.debug(f"Seeded {k} centroids from {samples}")
    return centroids
