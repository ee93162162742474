"""Word vectors stored in and read back from the vector database."""
import asyncio
import json
import logging
from typing import Sequence

from models import NeighborMatch

from .base import EmbeddingProvider

logger = logging.getLogger(__name__)

DEFAULT_DIMENSIONS = 50


def _parse_embedding(emb) -> list[float]:
    # pgvector columns come back from PostgREST as "[0.1,0.2,...]"
    if isinstance(emb, str):
        emb = json.loads(emb)
    return [float(v) for v in emb]


class VectorDatabaseProvider(EmbeddingProvider):
    """
    Round-trips vectors through the word_vectors table.

    `store()` copies vectors for a word list from a source provider into the
    database (truncated to `dimensions`); lookups then read them back, so
    the evaluation only sees what the database returned.
    """

    name = "vector-db"

    def __init__(self, queries, source: EmbeddingProvider | None = None, dimensions: int = DEFAULT_DIMENSIONS):
        self.queries = queries
        self.source = source
        self.dimensions = dimensions

    async def _run(self, func, *args):
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, func, *args)

    async def store(self, words: Sequence[str]) -> list[str]:
        """
        Write vectors for the given words from the source provider.

        Returns:
            Words that were stored; words the source lacks are skipped
        """
        if self.source is None:
            raise ValueError("A source provider is required to store vectors")

        vectors = await self.source.lookup_many(list(dict.fromkeys(words)))
        entries = []
        for word, vector in vectors.items():
            if vector is None:
                logger.info(f"'{word}' not in source vocabulary, not stored")
                continue
            if len(vector) < self.dimensions:
                raise ValueError(
                    f"Vector for '{word}' has {len(vector)} dims, need {self.dimensions}"
                )
            entries.append({"word": word, "embedding": list(vector[: self.dimensions])})

        if entries:
            await self._run(self.queries.upsert_many, entries)
        logger.info(f"Stored {len(entries)} word vectors ({self.dimensions} dims)")
        return [e["word"] for e in entries]

    async def lookup(self, word: str) -> list[float] | None:
        row = await self._run(self.queries.get_by_word, word)
        if row is None:
            return None
        return _parse_embedding(row["embedding"])

    async def lookup_many(self, words: Sequence[str]) -> dict[str, list[float] | None]:
        """Read all words back in a single query."""
        rows = await self._run(self.queries.get_by_words, list(words))
        found = {row["word"]: _parse_embedding(row["embedding"]) for row in rows}
        return {word: found.get(word) for word in words}

    async def nearest_words(self, word: str, top_k: int = 3) -> list[NeighborMatch]:
        """
        Find the stored words most similar to `word`.

        The query word itself is included when stored, as it is its own
        closest match.
        """
        vector = await self.lookup(word)
        if vector is None:
            logger.info(f"'{word}' not stored, no neighbors to search")
            return []

        rows = await self._run(self.queries.match_words, vector, top_k)
        return [NeighborMatch(word=row["word"], similarity=row["similarity"]) for row in rows]
