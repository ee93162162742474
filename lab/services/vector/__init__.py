"""Embedding services for vectorizing text."""
from .embedder import EMBEDDING_MODEL, embed_texts, embed_text

__all__ = ["EMBEDDING_MODEL", "embed_texts", "embed_text"]
