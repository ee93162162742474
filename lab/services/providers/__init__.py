"""Interchangeable sources of word vectors."""
from .base import EmbeddingProvider, InMemoryProvider
from .encoder import OpenAIEncoderProvider, SentenceEncoderProvider
from .glove import GloveFileProvider, default_glove_path, parse_glove_lines
from .random_matrix import RandomEmbeddingProvider
from .vector_db import VectorDatabaseProvider

__all__ = [
    "EmbeddingProvider",
    "InMemoryProvider",
    "OpenAIEncoderProvider",
    "SentenceEncoderProvider",
    "GloveFileProvider",
    "default_glove_path",
    "parse_glove_lines",
    "RandomEmbeddingProvider",
    "VectorDatabaseProvider",
]
