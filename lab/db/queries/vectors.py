"""Database queries for the word_vectors table."""
from typing import Any

from db.supabase_client import get_supabase_client

TABLE_WORD_VECTORS = "word_vectors"
MATCH_FUNCTION = "match_word_vectors"


class WordVectorQueries:
    """Centralized queries for the word_vectors table (pgvector)."""

    def __init__(self, client=None, table: str = TABLE_WORD_VECTORS):
        self.db = client or get_supabase_client()
        self.table = table

    def upsert_many(self, entries: list[dict[str, Any]]) -> list[dict]:
        """
        Insert or replace vectors for several words.

        Each dict should have: word, embedding
        """
        if not entries:
            return []

        normalized = [
            {
                "word": e["word"],
                "embedding": [float(v) for v in e["embedding"]],
            }
            for e in entries
        ]
        result = self.db.table(self.table).upsert(normalized, on_conflict="word").execute()
        return result.data

    def get_by_word(self, word: str) -> dict | None:
        """Get the stored vector for a single word."""
        result = (
            self.db.table(self.table)
            .select("*")
            .eq("word", word)
            .limit(1)
            .execute()
        )
        return result.data[0] if result.data else None

    def get_by_words(self, words: list[str]) -> list[dict]:
        """Get stored vectors for multiple words."""
        if not words:
            return []

        result = (
            self.db.table(self.table)
            .select("*")
            .in_("word", list(words))
            .execute()
        )
        return result.data

    def delete_by_words(self, words: list[str]) -> None:
        """Delete stored vectors for the given words."""
        if not words:
            return
        self.db.table(self.table).delete().in_("word", list(words)).execute()

    def match_words(
        self,
        query_embedding: list[float],
        match_count: int = 3,
        match_threshold: float = -1.0,
    ) -> list[dict]:
        """
        Find the stored words closest to a query vector using the RPC function.

        Args:
            query_embedding: The embedding vector to compare against
            match_count: Maximum number of results (default 3)
            match_threshold: Minimum similarity score (default -1, no filtering)

        Returns:
            List of {word, similarity} rows, most similar first
        """
        result = self.db.rpc(
            MATCH_FUNCTION,
            {
                "query_embedding": [float(v) for v in query_embedding],
                "match_threshold": match_threshold,
                "match_count": match_count,
            },
        ).execute()
        return result.data
