from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


def tokenize(doc: str) -> List[str]:
    return doc.lower().split()


@dataclass(frozen=True)
class Vocabulary:
    tokens: Tuple[str, ...]
    index: Dict[str, int]

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Vocabulary":
        ordered = tuple(sorted(set(tokens)))
        return cls(tokens=ordered, index={t: i for i, t in enumerate(ordered)})

    def __len__(self):
        return len(self.tokens)

    def __contains__(self, token):
        return token in self.index


@dataclass(frozen=True)
class RunContext:
    """Everything one clustering attempt reads: documents, vocabulary, sparse vectors."""
    documents: Tuple[str, ...]
    vocabulary: Vocabulary
    vectors: Dict[str, Counter]


def build_vocabulary(documents: Iterable[str]) -> Vocabulary:
    tokens = set()
    for doc in documents:
        tokens.update(tokenize(doc))
    return Vocabulary.from_tokens(tokens)


def vectorize(documents: Iterable[str]) -> Dict[str, Counter]:
    # identical documents land on the same key; counts are identical so last write is fine
    vectors = {}
    for doc in documents:
        vectors[doc] = Counter(tokenize(doc))
    return vectors


def build_context(documents: Iterable[str]) -> RunContext:
    docs = list(documents)
    vectors = vectorize(docs)
    return RunContext(
        documents=tuple(vectors.keys()),
        vocabulary=build_vocabulary(docs),
        vectors=vectors,
    )
