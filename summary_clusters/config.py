from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv())  # loads the nearest .env up the tree

import logging
import os

CLUSTER_ITERATIONS = int(os.getenv("CLUSTER_ITERATIONS", "10"))       # 0 = run until no reassignment
CLUSTER_METRIC = os.getenv("CLUSTER_METRIC", "cosine")                 # cosine | euclidean
CLUSTER_MAX_RETRIES = int(os.getenv("CLUSTER_MAX_RETRIES", "100"))
CLUSTER_CONVERGENCE_LIMIT = int(os.getenv("CLUSTER_CONVERGENCE_LIMIT", "1000"))
CLUSTER_SEED = int(os.environ["CLUSTER_SEED"]) if os.getenv("CLUSTER_SEED") else None  # unset = unseeded
CLUSTER_CACHE_TTL = int(os.getenv("CLUSTER_CACHE_TTL", "120"))
CLUSTER_CACHE_MAX_ENTRIES = int(os.getenv("CLUSTER_CACHE_MAX_ENTRIES", "256"))
CLUSTER_EXTRA_STOPWORDS = [
    w.strip().lower() for w in os.getenv("CLUSTER_EXTRA_STOPWORDS", "").split(",") if w.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))


def configure_logging(level: str | None = None):
    logging.basicConfig(
        level=(level or LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
