"""Randomly-initialized embedding matrix over a fixed vocabulary."""
import logging
from typing import Sequence

import numpy as np

from .base import EmbeddingProvider

logger = logging.getLogger(__name__)

DEFAULT_DIMENSIONS = 5


class RandomEmbeddingProvider(EmbeddingProvider):
    """One standard-normal row per vocabulary word, as an untrained embedding layer would hold."""

    name = "random-matrix"

    def __init__(
        self,
        vocabulary: Sequence[str],
        dimensions: int = DEFAULT_DIMENSIONS,
        seed: int | None = None,
    ):
        if dimensions < 1:
            raise ValueError(f"dimensions must be positive, got {dimensions}")

        self.vocabulary = list(dict.fromkeys(vocabulary))
        self.dimensions = dimensions
        self._index = {word: i for i, word in enumerate(self.vocabulary)}

        rng = np.random.default_rng(seed)
        self._matrix = rng.standard_normal((len(self.vocabulary), dimensions))
        logger.info(f"Initialized {len(self.vocabulary)}x{dimensions} embedding matrix (seed={seed})")

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix.copy()

    def index_of(self, word: str) -> int | None:
        return self._index.get(word)

    async def lookup(self, word: str) -> list[float] | None:
        idx = self._index.get(word)
        if idx is None:
            return None
        return self._matrix[idx].tolist()
