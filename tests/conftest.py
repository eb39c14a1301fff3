import random

import pytest

CORPUS = [
    "java programming language",
    "python programming",
    "nlp python",
    "programming scala",
    "high price",
    "low price of sales",
    "sales manager",
    "retail price",
    "java sales",
    "python high price",
    "scala manager",
]


class ScriptedRng:
    """randrange() answers from a fixed list so seeding is exact."""

    def __init__(self, picks):
        self.picks = list(picks)
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return self.picks.pop(0)


@pytest.fixture
def corpus():
    return list(CORPUS)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng
