"""
Unit tests for the vector database provider and word_vectors queries.

The Supabase client is replaced by the in-memory fake from conftest.
"""
import asyncio

import pytest

from db.queries.vectors import MATCH_FUNCTION, TABLE_WORD_VECTORS, WordVectorQueries
from models import SimilarityLabel
from services.providers import InMemoryProvider, VectorDatabaseProvider
from services.similarity import evaluate


@pytest.fixture
def queries(fake_supabase):
    return WordVectorQueries(client=fake_supabase)


class TestWordVectorQueries:
    def test_upsert_and_get(self, queries, fake_supabase):
        queries.upsert_many([{"word": "cat", "embedding": [1, 0, 0]}])

        row = queries.get_by_word("cat")
        assert row["word"] == "cat"
        assert (TABLE_WORD_VECTORS, "upsert") in fake_supabase.calls

    def test_upsert_empty_is_noop(self, queries, fake_supabase):
        assert queries.upsert_many([]) == []
        assert fake_supabase.calls == []

    def test_get_by_words(self, queries):
        queries.upsert_many([
            {"word": "cat", "embedding": [1.0]},
            {"word": "dog", "embedding": [0.5]},
        ])

        rows = queries.get_by_words(["dog", "unicorn"])
        assert [row["word"] for row in rows] == ["dog"]
        assert queries.get_by_words([]) == []

    def test_delete_by_words(self, queries):
        queries.upsert_many([{"word": "cat", "embedding": [1.0]}])
        queries.delete_by_words(["cat"])

        assert queries.get_by_word("cat") is None

    def test_match_words_calls_rpc(self, queries, fake_supabase):
        fake_supabase.rpc_results[MATCH_FUNCTION] = [{"word": "cat", "similarity": 1.0}]

        rows = queries.match_words([1, 0, 0], match_count=2)

        assert rows == [{"word": "cat", "similarity": 1.0}]
        name, params = fake_supabase.rpc_calls[0]
        assert name == MATCH_FUNCTION
        assert params["match_count"] == 2
        assert params["query_embedding"] == [1.0, 0.0, 0.0]


class TestVectorDatabaseProvider:
    def test_store_skips_missing_words(self, queries, animal_vectors):
        provider = VectorDatabaseProvider(queries, source=InMemoryProvider(animal_vectors), dimensions=3)

        stored = asyncio.run(provider.store(["cat", "unicorn", "dog"]))

        assert stored == ["cat", "dog"]
        assert queries.get_by_word("unicorn") is None

    def test_store_truncates_dimensions(self, queries, animal_vectors):
        provider = VectorDatabaseProvider(queries, source=InMemoryProvider(animal_vectors), dimensions=2)
        asyncio.run(provider.store(["dog"]))

        assert asyncio.run(provider.lookup("dog")) == [0.9, 0.1]

    def test_store_rejects_short_vectors(self, queries, animal_vectors):
        provider = VectorDatabaseProvider(queries, source=InMemoryProvider(animal_vectors), dimensions=50)

        with pytest.raises(ValueError, match="has 3 dims, need 50"):
            asyncio.run(provider.store(["cat"]))

    def test_store_requires_source(self, queries):
        with pytest.raises(ValueError, match="source provider is required"):
            asyncio.run(VectorDatabaseProvider(queries).store(["cat"]))

    def test_lookup_parses_stored_strings(self, queries):
        queries.upsert_many([{"word": "cat", "embedding": [0.25, -1.5]}])
        provider = VectorDatabaseProvider(queries, dimensions=2)

        assert asyncio.run(provider.lookup("cat")) == [0.25, -1.5]
        assert asyncio.run(provider.lookup("unicorn")) is None

    def test_round_trip_evaluation(self, queries, animal_vectors):
        provider = VectorDatabaseProvider(queries, source=InMemoryProvider(animal_vectors), dimensions=3)

        async def run():
            await provider.store(["cat", "dog", "fruit"])
            return await evaluate(["cat", "dog", "fruit", "unicorn"], provider)

        report = asyncio.run(run())

        assert report.provider == "vector-db"
        assert report.missing_words == ["unicorn"]
        assert report.get_pair("cat", "dog").label == SimilarityLabel.HIGHLY_SIMILAR
        assert len(report.pairs) == 3

    def test_nearest_words(self, queries, fake_supabase, animal_vectors):
        fake_supabase.rpc_results[MATCH_FUNCTION] = [
            {"word": "cat", "similarity": 1.0},
            {"word": "dog", "similarity": 0.9939},
        ]
        provider = VectorDatabaseProvider(queries, source=InMemoryProvider(animal_vectors), dimensions=3)
        asyncio.run(provider.store(["cat", "dog"]))

        matches = asyncio.run(provider.nearest_words("cat", top_k=2))

        assert [m.word for m in matches] == ["cat", "dog"]
        assert matches[1].similarity == pytest.approx(0.9939)
        assert fake_supabase.rpc_calls[0][1]["match_count"] == 2

    def test_nearest_words_unknown(self, queries, fake_supabase):
        provider = VectorDatabaseProvider(queries, dimensions=3)

        assert asyncio.run(provider.nearest_words("unicorn")) == []
        assert fake_supabase.rpc_calls == []
