from .similarity import (
    NeighborMatch,
    PairError,
    PairSimilarity,
    SimilarityLabel,
    SimilarityReport,
    WordLookup,
)

__all__ = [
    "NeighborMatch",
    "PairError",
    "PairSimilarity",
    "SimilarityLabel",
    "SimilarityReport",
    "WordLookup",
]
