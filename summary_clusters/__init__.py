"""Bag-of-words K-means clustering for short text summaries."""

__version__ = "0.1.0"
