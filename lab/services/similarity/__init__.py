"""Cosine similarity evaluation for word embeddings."""
from .errors import AbsentWordError, DegenerateVectorError, DimensionMismatchError, SimilarityError
from .evaluator import (
    DEFAULT_WORDS,
    HIGH_SIMILARITY_THRESHOLD,
    MODERATE_SIMILARITY_THRESHOLD,
    classify,
    cosine_similarity,
    evaluate,
    evaluate_sync,
    require_vector,
)
from .report import format_vector_preview, render_neighbors, render_pairs, render_report, render_vector_preview

__all__ = [
    "AbsentWordError",
    "DegenerateVectorError",
    "DimensionMismatchError",
    "SimilarityError",
    "DEFAULT_WORDS",
    "HIGH_SIMILARITY_THRESHOLD",
    "MODERATE_SIMILARITY_THRESHOLD",
    "classify",
    "cosine_similarity",
    "evaluate",
    "evaluate_sync",
    "require_vector",
    "format_vector_preview",
    "render_neighbors",
    "render_pairs",
    "render_report",
    "render_vector_preview",
]
