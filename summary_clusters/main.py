import csv
import io
import random

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel
import uvicorn

from summary_clusters.config import (
    API_HOST,
    API_PORT,
    CLUSTER_ITERATIONS,
    CLUSTER_METRIC,
    CLUSTER_SEED,
    configure_logging,
)
from summary_clusters.services.cache import clusters_cache, request_key
from summary_clusters.services.clustering import build_clusters

configure_logging()

app = FastAPI(title="Summary Clusters")


class ClusterRequest(BaseModel):
    documents: list[str]
    iterations: int | None = None  # 0 = run until stable
    metric: str | None = None      # cosine | euclidean
    seed: int | None = None


def _run(payload: ClusterRequest):
    iterations = CLUSTER_ITERATIONS if payload.iterations is None else payload.iterations
    metric = payload.metric or CLUSTER_METRIC
    seed = payload.seed if payload.seed is not None else CLUSTER_SEED

    # only seeded runs are reproducible, so only those are worth caching
    cache_key = request_key(payload.documents, iterations, metric, seed) if seed is not None else None
    if cache_key:
        cached = clusters_cache.get(cache_key)
        if cached:
            return cached

    try:
        data = build_clusters(
            payload.documents,
            iterations=iterations,
            metric=metric,
            rng=random.Random(seed),
        )
    except ValueError as e:  # ClusteringError and bad metric names
        raise HTTPException(status_code=422, detail=str(e))

    if cache_key:
        clusters_cache.set(cache_key, data)
    return data


@app.get("/")
def health():
    return {"status": "ok"}


@app.post("/cluster")
def cluster_documents(payload: ClusterRequest):
    """
    Cluster the posted summaries. Returns k, the label of every document and
    the clusters sorted by size with a short term hint each.
    """
    return _run(payload)


@app.post("/export/clusters.csv")
def export_clusters_csv(payload: ClusterRequest):
    data = _run(payload)

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["cluster_label", "size", "hint", "document"])
    for cl in data["clusters"]:
        for doc in cl["documents"]:
            writer.writerow([cl["label"], cl["size"], cl["hint"], doc])
    return Response(output.getvalue(), media_type="text/csv")


if __name__ == "__main__":
    uvicorn.run(app, host=API_HOST, port=API_PORT)
