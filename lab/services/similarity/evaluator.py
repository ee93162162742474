"""Pairwise cosine similarity over a candidate word list."""
import asyncio
import logging
import math
from typing import Sequence

import numpy as np

from models import PairError, PairSimilarity, SimilarityLabel, SimilarityReport, WordLookup
from services.providers.base import EmbeddingProvider

from .errors import AbsentWordError, DegenerateVectorError, DimensionMismatchError

logger = logging.getLogger(__name__)

# Lower bounds are inclusive
HIGH_SIMILARITY_THRESHOLD = 0.7
MODERATE_SIMILARITY_THRESHOLD = 0.4

# Candidate words shared by the demo scripts
DEFAULT_WORDS = [
    "cat", "dog", "kitten", "puppy",
    "apple", "banana", "orange", "fruit",
    "car", "bus", "train", "vehicle",
    "king", "queen", "man", "woman",
]


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.

    Args:
        vec_a: First vector
        vec_b: Second vector

    Returns:
        Cosine similarity score between -1 and 1

    Raises:
        DimensionMismatchError: If the vectors have different lengths
        DegenerateVectorError: If either vector is empty, has zero norm, or
            contains NaN or infinite values
    """
    a = np.asarray(vec_a, dtype=np.float64)
    b = np.asarray(vec_b, dtype=np.float64)

    if a.size == 0 or b.size == 0:
        raise DegenerateVectorError("Vectors cannot be empty")

    if a.shape != b.shape:
        raise DimensionMismatchError(a.size, b.size)

    if not (np.isfinite(a).all() and np.isfinite(b).all()):
        raise DegenerateVectorError("Cosine similarity is undefined for vectors with NaN or infinite values")

    # Rescale by the largest magnitude so the dot product and norms
    # neither overflow nor underflow
    scale_a = np.abs(a).max()
    scale_b = np.abs(b).max()

    if scale_a == 0 or scale_b == 0:
        raise DegenerateVectorError("Cosine similarity is undefined for a zero-norm vector")

    a = a / scale_a
    b = b / scale_b

    score = float(np.dot(a, b) / (np.linalg.norm(a) * np.linalg.norm(b)))
    if not math.isfinite(score):
        raise DegenerateVectorError(f"Cosine similarity is undefined (got {score})")

    # Rounding can push |score| slightly past 1
    return max(-1.0, min(1.0, score))


def classify(score: float) -> SimilarityLabel:
    """Map a similarity score to its label."""
    if score >= HIGH_SIMILARITY_THRESHOLD:
        return SimilarityLabel.HIGHLY_SIMILAR
    if score >= MODERATE_SIMILARITY_THRESHOLD:
        return SimilarityLabel.MODERATELY_SIMILAR
    return SimilarityLabel.NOT_VERY_SIMILAR


async def require_vector(provider: EmbeddingProvider, word: str) -> list[float]:
    """Look up a word and raise AbsentWordError if the provider lacks it."""
    vector = await provider.lookup(word)
    if vector is None:
        raise AbsentWordError(word, getattr(provider, "name", None))
    return vector


async def evaluate(words: Sequence[str], provider: EmbeddingProvider) -> SimilarityReport:
    """
    Compare every pair of candidate words using vectors from a provider.

    Words the provider does not know are reported once in `lookups` and left
    out of every pair. Pairs that cannot be compared (zero-norm or non-finite
    vectors, or mismatched dimensions) are reported in `errors` and the run
    continues.
    Both pairs and errors carry `pair_index`, their position in the (i, j)
    enumeration of `words`.

    Args:
        words: Candidate words, in the order pairs should be reported
        provider: An EmbeddingProvider

    Returns:
        SimilarityReport with per-word lookups, pair scores and pair errors
    """
    words = list(words)
    provider_name = getattr(provider, "name", type(provider).__name__)
    unique_words = list(dict.fromkeys(words))

    logger.info(f"Resolving {len(unique_words)} words with {provider_name}")
    vectors = await provider.lookup_many(unique_words)

    lookups = []
    for word in unique_words:
        vector = vectors.get(word)
        if vector is None:
            logger.info(f"'{word}' not found in vocabulary of {provider_name}")
            lookups.append(WordLookup(word=word, found=False))
        else:
            lookups.append(WordLookup(word=word, found=True, vector=[float(v) for v in vector]))

    pairs: list[PairSimilarity] = []
    errors: list[PairError] = []

    pair_index = -1
    for i in range(len(words)):
        for j in range(i + 1, len(words)):
            pair_index += 1
            w1, w2 = words[i], words[j]
            vec_1, vec_2 = vectors.get(w1), vectors.get(w2)
            if vec_1 is None or vec_2 is None:
                continue

            try:
                score = cosine_similarity(vec_1, vec_2)
            except (DegenerateVectorError, DimensionMismatchError) as e:
                logger.warning(f"Skipping pair {w1} vs {w2}: {e}")
                errors.append(
                    PairError(
                        word_1=w1,
                        word_2=w2,
                        pair_index=pair_index,
                        error_type=type(e).__name__,
                        message=str(e),
                    )
                )
                continue

            pairs.append(
                PairSimilarity(
                    word_1=w1,
                    word_2=w2,
                    score=score,
                    label=classify(score),
                    pair_index=pair_index,
                )
            )

    logger.info(
        f"Compared {len(pairs)} pairs from {len(words)} words "
        f"({len(errors)} skipped, {sum(not lookup.found for lookup in lookups)} missing)"
    )

    return SimilarityReport(
        provider=provider_name,
        words=words,
        lookups=lookups,
        pairs=pairs,
        errors=errors,
    )


def evaluate_sync(words: Sequence[str], provider: EmbeddingProvider) -> SimilarityReport:
    """Synchronous wrapper for evaluate()."""
    return asyncio.run(evaluate(words, provider))
