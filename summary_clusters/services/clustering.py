import logging
import math
from typing import Any, Dict, Iterable, List, Optional

from summary_clusters.config import (
    CLUSTER_CONVERGENCE_LIMIT,
    CLUSTER_ITERATIONS,
    CLUSTER_MAX_RETRIES,
    CLUSTER_METRIC,
)
from summary_clusters.errors import EmptyCorpusError
from summary_clusters.nlp.cluster import kmeans, top_terms_for_cluster
from summary_clusters.nlp.preprocess import normalize
from summary_clusters.nlp.similarity import Direction

logger = logging.getLogger(__name__)


def compute_k(document_count: int) -> int:
    """K = floor(sqrt(n / 2))."""
    return math.isqrt(max(0, document_count) // 2)


def _cluster_normalized(
    raw_documents: List[str],
    iterations: int,
    metric,
    direction: Optional[Direction],
    rng,
    max_retries: int,
    convergence_limit: int,
):
    if not raw_documents:
        raise EmptyCorpusError()
    k = compute_k(len(raw_documents))
    normalized = normalize(raw_documents)

    if k == 0:
        # too few documents for k >= 1: everything shares one trivial cluster
        logger.info(f"Corpus of {len(raw_documents)} is too small to split; using a single cluster")
        return 1, normalized, None, {doc: 0 for doc in normalized.values()}

    result = kmeans(
        list(dict.fromkeys(normalized.values())),
        k,
        iterations=iterations,
        metric=metric,
        direction=direction,
        rng=rng,
        max_retries=max_retries,
        convergence_limit=convergence_limit,
    )
    return k, normalized, result, result.assignments


def run_clustering(
    raw_documents: Iterable[str],
    iterations: int = CLUSTER_ITERATIONS,
    metric=CLUSTER_METRIC,
    direction: Optional[Direction] = None,
    rng=None,
    max_retries: int = CLUSTER_MAX_RETRIES,
    convergence_limit: int = CLUSTER_CONVERGENCE_LIMIT,
) -> Dict[str, str]:
    """Cluster raw summaries; returns {original (trimmed) document: cluster label as str}."""
    _, normalized, _, assignments = _cluster_normalized(
        list(raw_documents), iterations, metric, direction, rng,
        max_retries, convergence_limit,
    )
    return {orig: str(assignments[norm]) for orig, norm in normalized.items()}


def build_clusters(
    raw_documents: Iterable[str],
    iterations: int = CLUSTER_ITERATIONS,
    metric=CLUSTER_METRIC,
    direction: Optional[Direction] = None,
    rng=None,
    max_retries: int = CLUSTER_MAX_RETRIES,
    convergence_limit: int = CLUSTER_CONVERGENCE_LIMIT,
    n_terms: int = 3,
) -> Dict[str, Any]:
    """
    Cluster raw summaries and group them per label.

    Returns {k, passes, attempts, labels, clusters} where clusters is a list of
    {label, size, hint, documents} sorted by size, largest first.
    """
    k, normalized, result, assignments = _cluster_normalized(
        list(raw_documents), iterations, metric, direction, rng,
        max_retries, convergence_limit,
    )
    labels = {orig: str(assignments[norm]) for orig, norm in normalized.items()}
    hints = top_terms_for_cluster(result, n_terms=n_terms) if result else {}

    buckets = {}
    for orig, lab in labels.items():
        buckets.setdefault(int(lab), []).append(orig)

    clusters = [{
        "label": lab,
        "size": len(docs),
        "hint": hints.get(lab, ""),
        "documents": docs,
    } for lab, docs in buckets.items()]
    clusters.sort(key=lambda x: (-x["size"], x["label"]))

    return {
        "k": k,
        "passes": result.passes if result else 0,
        "attempts": result.attempts if result else 0,
        "labels": labels,
        "clusters": clusters,
    }
