"""Errors raised while comparing word vectors."""


class SimilarityError(Exception):
    """Base class for similarity evaluation errors."""


class AbsentWordError(SimilarityError, KeyError):
    """A word has no vector in the provider's vocabulary."""

    def __init__(self, word: str, provider: str | None = None):
        self.word = word
        self.provider = provider
        where = f" of {provider}" if provider else ""
        super().__init__(f"'{word}' is not in the vocabulary{where}")

    def __str__(self) -> str:
        return self.args[0]


class DegenerateVectorError(SimilarityError, ValueError):
    """A vector is empty or has zero norm, so cosine similarity is undefined."""


class DimensionMismatchError(SimilarityError, ValueError):
    """Two vectors being compared have different lengths."""

    def __init__(self, len_a: int, len_b: int):
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(f"Vector dimensions must match: {len_a} != {len_b}")
