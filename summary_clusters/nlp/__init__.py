from .preprocess import clean_text, normalize
from .vectorize import RunContext, Vocabulary, build_context, build_vocabulary, vectorize
from .similarity import Direction, Metric, cosine_similarity, euclidean_distance
from .centroids import initialize_centroids
from .cluster import ClusteringResult, kmeans, top_terms_for_cluster

__all__ = [
    "clean_text",
    "normalize",
    "RunContext",
    "Vocabulary",
    "build_context",
    "build_vocabulary",
    "vectorize",
    "Direction",
    "Metric",
    "cosine_similarity",
    "euclidean_distance",
    "initialize_centroids",
    "ClusteringResult",
    "kmeans",
    "top_terms_for_cluster",
]
