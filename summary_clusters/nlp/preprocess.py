import re
from typing import Iterable

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from summary_clusters.config import CLUSTER_EXTRA_STOPWORDS

ESCAPES = re.compile(r"\\[ntrfvb]|[\t\n\r\f\v\b]")  # control chars and their literal "\n"-style spellings
SPECIAL = re.compile(r"[^\w\s]|_")
WS = re.compile(r"\s+")

STOPWORDS = frozenset(ENGLISH_STOP_WORDS) | frozenset(CLUSTER_EXTRA_STOPWORDS)


def strip_escapes(s: str) -> str:
    return ESCAPES.sub(" ", s)


def clean_text(s: str, stopwords: Iterable[str] | None = None) -> str:
    """Lower-case, drop escapes and punctuation, remove stop words, collapse spaces."""
    if not s: return ""
    stop = STOPWORDS if stopwords is None else frozenset(stopwords)
    s = strip_escapes(s.lower())
    s = SPECIAL.sub("", s)
    # whole-token match only: "offer" survives even though "of" is a stop word
    tokens = [t for t in s.split() if t not in stop]
    return WS.sub(" ", " ".join(tokens)).strip()


def normalize(raw_documents: Iterable[str], stopwords: Iterable[str] | None = None) -> dict[str, str]:
    """
    Map each distinct raw document (escapes replaced by spaces, trimmed) to its
    normalized text.
    Several raw documents may share one normalized form.
    """
    out = {}
    for doc in raw_documents:
        key = strip_escapes(doc or "").strip()
        out[key] = clean_text(key, stopwords=stopwords)
    return out
