"""
Unit tests for the encoder providers.

Model and API calls are replaced with deterministic fakes.
"""
import asyncio

import numpy as np
import pytest

from services.providers import OpenAIEncoderProvider, SentenceEncoderProvider
from services.providers import encoder as encoder_module
from services.similarity import evaluate_sync


class FakeSentenceModel:
    def __init__(self):
        self.calls = []

    def encode(self, words, normalize_embeddings=False, convert_to_numpy=True):
        self.calls.append((list(words), normalize_embeddings))
        vectors = np.array([[len(w), 1.0, 0.0] for w in words], dtype=np.float32)
        if normalize_embeddings:
            vectors = vectors / np.linalg.norm(vectors, axis=1, keepdims=True)
        return vectors


class TestOpenAIEncoderProvider:
    def test_batches_unique_words(self, monkeypatch):
        calls = []

        def fake_embed_texts(texts, model):
            calls.append((list(texts), model))
            return [[float(len(t)), 1.0] for t in texts]

        monkeypatch.setattr(encoder_module, "embed_texts", fake_embed_texts)
        provider = OpenAIEncoderProvider(model="text-embedding-3-small")

        result = asyncio.run(provider.lookup_many(["cat", "horse", "cat"]))

        assert calls == [(["cat", "horse"], "text-embedding-3-small")]
        assert result == {"cat": [3.0, 1.0], "horse": [5.0, 1.0]}

    def test_single_lookup(self, monkeypatch):
        monkeypatch.setattr(encoder_module, "embed_texts", lambda texts, model: [[0.5, 0.5] for _ in texts])

        assert asyncio.run(OpenAIEncoderProvider().lookup("cat")) == [0.5, 0.5]

    def test_empty_lookup(self):
        assert asyncio.run(OpenAIEncoderProvider().lookup_many([])) == {}


class TestSentenceEncoderProvider:
    def test_default_model_name(self, monkeypatch):
        monkeypatch.delenv("SENTENCE_MODEL", raising=False)
        assert SentenceEncoderProvider().model_name == "all-MiniLM-L6-v2"

        monkeypatch.setenv("SENTENCE_MODEL", "paraphrase-MiniLM-L3-v2")
        assert SentenceEncoderProvider().model_name == "paraphrase-MiniLM-L3-v2"

    def test_encodes_normalized(self):
        provider = SentenceEncoderProvider("fake-model")
        fake = FakeSentenceModel()
        provider.__dict__["model"] = fake

        result = asyncio.run(provider.lookup_many(["cat", "dog"]))

        assert fake.calls == [(["cat", "dog"], True)]
        for vector in result.values():
            assert np.linalg.norm(vector) == pytest.approx(1.0, abs=1e-6)
            assert all(isinstance(v, float) for v in vector)

    def test_evaluate_with_encoder(self):
        provider = SentenceEncoderProvider("fake-model")
        provider.__dict__["model"] = FakeSentenceModel()

        report = evaluate_sync(["cat", "dog", "horse"], provider)

        assert report.missing_words == []
        assert report.get_pair("cat", "dog").score == pytest.approx(1.0)
        assert len(report.pairs) == 3
