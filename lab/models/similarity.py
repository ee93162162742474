from enum import Enum

from pydantic import BaseModel, Field


class SimilarityLabel(str, Enum):
    """Qualitative buckets for a cosine similarity score, highest first."""
    HIGHLY_SIMILAR = "highly similar"
    MODERATELY_SIMILAR = "moderately similar"
    NOT_VERY_SIMILAR = "not very similar"


class WordLookup(BaseModel):
    """Result of resolving one candidate word against a provider."""
    word: str
    found: bool
    vector: list[float] | None = None


class PairSimilarity(BaseModel):
    """Cosine similarity between two resolved words."""
    word_1: str
    word_2: str
    score: float = Field(ge=-1.0, le=1.0)
    label: SimilarityLabel
    pair_index: int = 0


class PairError(BaseModel):
    """A pair that could not be compared."""
    word_1: str
    word_2: str
    pair_index: int = 0
    error_type: str
    message: str


class NeighborMatch(BaseModel):
    """A stored word returned by a vector database similarity search."""
    word: str
    similarity: float


class SimilarityReport(BaseModel):
    """Full output of one evaluation run."""
    provider: str | None = None
    words: list[str]
    lookups: list[WordLookup] = Field(default_factory=list)
    pairs: list[PairSimilarity] = Field(default_factory=list)
    errors: list[PairError] = Field(default_factory=list)

    @property
    def found_words(self) -> list[str]:
        return [lookup.word for lookup in self.lookups if lookup.found]

    @property
    def missing_words(self) -> list[str]:
        return [lookup.word for lookup in self.lookups if not lookup.found]

    def get_pair(self, word_1: str, word_2: str) -> PairSimilarity | None:
        """Find the pair for two words, in either order."""
        for pair in self.pairs:
            if {pair.word_1, pair.word_2} == {word_1, word_2}:
                return pair
        return None
