import csv
import io

import pytest
from fastapi.testclient import TestClient

from summary_clusters.main import app
from summary_clusters.services.cache import clusters_cache


@pytest.fixture
def client():
    clusters_cache.clear()
    return TestClient(app)


def test_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_cluster_endpoint(client, corpus):
    r = client.post("/cluster", json={"documents": corpus, "iterations": 10, "metric": "cosine", "seed": 42})
    assert r.status_code == 200
    body = r.json()
    assert body["k"] == 2
    assert set(body["labels"]) == set(corpus)
    assert set(body["labels"].values()) == {"0", "1"}


def test_seeded_requests_are_cached(client, corpus):
    payload = {"documents": corpus, "seed": 7}
    first = client.post("/cluster", json=payload).json()
    assert len(clusters_cache) == 1
    second = client.post("/cluster", json=payload).json()
    assert first == second


def test_unknown_metric_is_rejected(client, corpus):
    r = client.post("/cluster", json={"documents": corpus, "metric": "manhattan"})
    assert r.status_code == 422
    assert "manhattan" in r.json()["detail"]


def test_empty_corpus_is_rejected(client):
    r = client.post("/cluster", json={"documents": []})
    assert r.status_code == 422


def test_export_csv(client, corpus):
    r = client.post("/export/clusters.csv", json={"documents": corpus, "seed": 3})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    rows = list(csv.reader(io.StringIO(r.text)))
    assert rows[0] == ["cluster_label", "size", "hint", "document"]
    assert sorted(row[3] for row in rows[1:]) == sorted(corpus)
