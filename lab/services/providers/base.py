"""Embedding provider interface shared by every vector source."""
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Sequence

logger = logging.getLogger(__name__)

MAX_CONCURRENT_LOOKUPS = 16


class EmbeddingProvider(ABC):
    """
    A source of word vectors.

    Lookups are awaitable so that file- and memory-backed providers can
    resolve immediately while database and network providers suspend.
    A missing word resolves to None rather than raising.
    """

    name: str = "provider"

    @abstractmethod
    async def lookup(self, word: str) -> list[float] | None:
        """Return the vector for a word, or None if it is not in the vocabulary."""

    async def lookup_many(self, words: Sequence[str]) -> dict[str, list[float] | None]:
        """Resolve several words concurrently."""
        semaphore = asyncio.Semaphore(MAX_CONCURRENT_LOOKUPS)

        async def _lookup(word: str) -> list[float] | None:
            async with semaphore:
                return await self.lookup(word)

        results = await asyncio.gather(*[_lookup(word) for word in words])
        return dict(zip(words, results))


class InMemoryProvider(EmbeddingProvider):
    """Provider backed by a plain word -> vector mapping."""

    name = "in-memory"

    def __init__(self, vectors: dict[str, Sequence[float]]):
        self._vectors = {word: [float(v) for v in vector] for word, vector in vectors.items()}

    def __contains__(self, word: str) -> bool:
        return word in self._vectors

    def __len__(self) -> int:
        return len(self._vectors)

    async def lookup(self, word: str) -> list[float] | None:
        vector = self._vectors.get(word)
        return list(vector) if vector is not None else None
