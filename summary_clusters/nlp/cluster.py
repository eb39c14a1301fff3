import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from summary_clusters.config import CLUSTER_CONVERGENCE_LIMIT, CLUSTER_ITERATIONS, CLUSTER_MAX_RETRIES
from summary_clusters.errors import DegenerateKError, EmptyCorpusError, UnsatisfiableClusterCountError
from summary_clusters.nlp.centroids import initialize_centroids, zero_centroid
from summary_clusters.nlp.similarity import Direction, Metric, score
from summary_clusters.nlp.vectorize import RunContext, build_context

logger = logging.getLogger(__name__)

UNASSIGNED = -1


@dataclass
class ClusteringResult:
    k: int
    context: RunContext
    assignments: Dict[str, int]
    centroids: List[np.ndarray]
    passes: int
    attempts: int

    def members(self, label: int) -> List[str]:
        return [doc for doc, lab in self.assignments.items() if lab == label]

    def sizes(self) -> List[int]:
        counts = [0] * self.k
        for lab in self.assignments.values():
            counts[lab] += 1
        return counts


def assign_documents(
    context: RunContext,
    centroids: List[np.ndarray],
    assignments: Dict[str, int],
    metric: Metric,
    direction: Direction,
) -> Tuple[Dict[str, int], int]:
    """Score every document against every centroid; return new assignments and how many moved."""
    new = {}
    changed = 0
    for doc in context.documents:
        vector = context.vectors[doc]
        best_j = 0
        best = score(metric, vector, centroids[0], context.vocabulary)
        for j in range(1, len(centroids)):
            s = score(metric, vector, centroids[j], context.vocabulary)
            if direction.better(s, best):
                best, best_j = s, j
        new[doc] = best_j
        if assignments.get(doc, UNASSIGNED) != best_j:
            changed += 1
    return new, changed


def update_centroids(
    context: RunContext,
    centroids: List[np.ndarray],
    assignments: Dict[str, int],
) -> List[np.ndarray]:
    sums = [zero_centroid(context) for _ in centroids]
    counts = [0] * len(centroids)
    for doc, j in assignments.items():
        if j == UNASSIGNED:
            continue
        counts[j] += 1
        for token, c in context.vectors[doc].items():
            sums[j][context.vocabulary.index[token]] += c

    out = []
    for j, centroid in enumerate(centroids):
        if counts[j] == 0:
            # no members: keep the previous position rather than reseeding
            out.append(centroid)
        else:
            out.append(sums[j] / counts[j])
    return out


def distinct_clusters(assignments: Dict[str, int], k: int) -> int:
    return len({lab for lab in assignments.values() if 0 <= lab < k})


def run_passes(
    context: RunContext,
    centroids: List[np.ndarray],
    iterations: int,
    metric: Metric,
    direction: Direction,
    convergence_limit: int = CLUSTER_CONVERGENCE_LIMIT,
):
    """
    Alternate assignment and update.
    iterations > 0 runs exactly that many passes, converged or not.
    iterations == 0 stops after the first pass in which no document moved.
    """
    assignments = {doc: UNASSIGNED for doc in context.documents}
    remaining = iterations
    passes = 0
    while True:
        assignments, changed = assign_documents(context, centroids, assignments, metric, direction)
        centroids = update_centroids(context, centroids, assignments)
        passes += 1
        logger.debug(f"Pass {passes}: {changed} of {len(assignments)} documents reassigned")

        if iterations > 0:
            remaining -= 1
            if remaining <= 0:
                break
        else:
            if not changed:
                break
            if passes >= convergence_limit:
                logger.warning(f"No convergence after {passes} passes; keeping the current partition")
                break
    return assignments, centroids, passes


def kmeans(
    documents: Iterable[str],
    k: int,
    iterations: int = CLUSTER_ITERATIONS,
    metric=Metric.COSINE,
    direction: Optional[Direction] = None,
    rng=None,
    max_retries: int = CLUSTER_MAX_RETRIES,
    convergence_limit: int = CLUSTER_CONVERGENCE_LIMIT,
) -> ClusteringResult:
    """
    K-means over bag-of-words vectors of already normalized documents.

    Every attempt rebuilds the vocabulary and vectors, reseeds the centroids and
    runs the pass loop. An attempt that leaves any of the k clusters empty is
    thrown away; after max_retries such attempts UnsatisfiableClusterCountError
    is raised.

    direction defaults to the metric's own (cosine maximizes, euclidean
    minimizes). Passing Direction.MAXIMIZE with euclidean picks the farthest
    centroid, which is how older callers behaved.
    """
    docs = list(documents)
    if not docs:
        raise EmptyCorpusError()
    if k < 1:
        raise DegenerateKError(k)
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")
    metric = Metric.parse(metric)
    direction = direction or metric.direction
    rng = rng or random.Random()
    if max_retries < 1:
        raise ValueError(f"max_retries must be >= 1, got {max_retries}")

    distinct = 0
    for attempt in range(1, max_retries + 1):
        context = build_context(docs)
        centroids = initialize_centroids(context, k, rng)
        assignments, centroids, passes = run_passes(
            context, centroids, iterations, metric, direction, convergence_limit=convergence_limit
        )
        distinct = distinct_clusters(assignments, k)
        if distinct >= k:
            logger.info(
                f"Clustered {len(context.documents)} documents into {k} clusters "
                f"({metric.value}/{direction.value}, {passes} passes, attempt {attempt})"
            )
            return ClusteringResult(
                k=k,
                context=context,
                assignments=assignments,
                centroids=centroids,
                passes=passes,
                attempts=attempt,
            )
        logger.warning(f"Attempt {attempt}: only {distinct} of {k} clusters have members, restarting")

    logger.error(f"Giving up after {max_retries} attempts with {distinct} of {k} clusters filled")
    raise UnsatisfiableClusterCountError(k, max_retries, distinct)


def top_terms_for_cluster(result: ClusteringResult, n_terms: int = 3) -> Dict[int, str]:
    # hint = heaviest centroid terms; ties fall back to vocabulary order
    tokens = result.context.vocabulary.tokens
    hints = {}
    for label, centroid in enumerate(result.centroids):
        order = np.argsort(-centroid, kind="stable")[:n_terms]
        terms = [tokens[i] for i in order if centroid[i] > 0]
        hints[label] = " ".join(terms)[:120]
    return hints
