class ClusteringError(ValueError):
    """Base error for a clustering run that cannot produce a partition."""


class EmptyCorpusError(ClusteringError):
    def __init__(self, message: str = "cannot cluster an empty corpus"):
        super().__init__(message)


class DegenerateKError(ClusteringError):
    def __init__(self, k: int):
        self.k = k
        super().__init__(f"cluster count must be at least 1, got {k}")


class UnsatisfiableClusterCountError(ClusteringError):
    """Raised when every retry still left some cluster without members."""

    def __init__(self, k: int, attempts: int, distinct: int):
        self.k = k
        self.attempts = attempts
        self.distinct = distinct
        super().__init__(
            f"could not fill {k} clusters after {attempts} attempts "
            f"(last attempt had {distinct} non-empty)"
        )
