"""Word vectors from transformer sentence encoders."""
import asyncio
import logging
import os
from functools import cached_property
from typing import Sequence

from services.vector import EMBEDDING_MODEL, embed_texts

from .base import EmbeddingProvider

logger = logging.getLogger(__name__)

DEFAULT_SENTENCE_MODEL = "all-MiniLM-L6-v2"


class _EncoderProvider(EmbeddingProvider):
    """Encoders accept any string, so every word resolves to a vector."""

    def _encode(self, words: list[str]) -> list[list[float]]:
        raise NotImplementedError

    async def lookup(self, word: str) -> list[float] | None:
        vectors = await self.lookup_many([word])
        return vectors[word]

    async def lookup_many(self, words: Sequence[str]) -> dict[str, list[float] | None]:
        words = list(dict.fromkeys(words))
        if not words:
            return {}

        loop = asyncio.get_event_loop()
        embeddings = await loop.run_in_executor(None, self._encode, words)
        return dict(zip(words, embeddings))


class OpenAIEncoderProvider(_EncoderProvider):
    """Embeds words with the OpenAI embeddings API, one batch per lookup."""

    name = "openai"

    def __init__(self, model: str = EMBEDDING_MODEL):
        self.model = model

    def _encode(self, words: list[str]) -> list[list[float]]:
        return embed_texts(words, model=self.model)


class SentenceEncoderProvider(_EncoderProvider):
    """
    Embeds words with a local sentence-transformers model.

    Token embeddings are mean pooled and L2-normalized. The model is
    downloaded on first use and cached under HF_HOME.
    """

    name = "sentence-transformers"

    def __init__(self, model_name: str | None = None, device: str | None = None):
        self.model_name = model_name or os.getenv("SENTENCE_MODEL", DEFAULT_SENTENCE_MODEL)
        self.device = device

    @cached_property
    def model(self):
        from sentence_transformers import SentenceTransformer

        logger.info(f"Loading sentence encoder {self.model_name}...")
        return SentenceTransformer(self.model_name, device=self.device)

    def _encode(self, words: list[str]) -> list[list[float]]:
        embeddings = self.model.encode(words, normalize_embeddings=True, convert_to_numpy=True)
        return embeddings.tolist()
