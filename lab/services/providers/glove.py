"""Word vectors from a pre-trained GloVe text file."""
import logging
import os
from pathlib import Path

import numpy as np

from .base import EmbeddingProvider

logger = logging.getLogger(__name__)

DEFAULT_GLOVE_FILE = "models/glove.6B.50d.txt"


def default_glove_path() -> Path:
    """GloVe file location, from GLOVE_FILE or the default models/ path."""
    return Path(os.getenv("GLOVE_FILE", DEFAULT_GLOVE_FILE))


def parse_glove_lines(lines, dimensions: int | None = None) -> dict[str, np.ndarray]:
    """
    Parse GloVe lines of the form `word v1 v2 ... vn`.

    Args:
        lines: Iterable of text lines
        dimensions: Keep only the first N values of each vector (None keeps all)

    Returns:
        Mapping of word to float32 vector
    """
    vocabulary: dict[str, np.ndarray] = {}
    for line_num, line in enumerate(lines, 1):
        line = line.rstrip()
        if not line:
            continue

        parts = line.split(" ")
        word, values = parts[0], parts[1:]
        if not values:
            raise ValueError(f"Line {line_num}: no vector values for '{word}'")

        if dimensions is not None:
            values = values[:dimensions]

        try:
            vocabulary[word] = np.asarray(values, dtype=np.float32)
        except ValueError as e:
            raise ValueError(f"Line {line_num}: invalid vector value for '{word}': {e}") from e

    return vocabulary


class GloveFileProvider(EmbeddingProvider):
    """Provider over a GloVe vocabulary loaded once from disk."""

    name = "glove"

    def __init__(self, vectors: dict[str, np.ndarray], source: str | None = None):
        # Held as-is; vectors become lists only when looked up
        self.vocabulary = vectors
        self.source = source

    def __contains__(self, word: str) -> bool:
        return word in self.vocabulary

    def __len__(self) -> int:
        return len(self.vocabulary)

    async def lookup(self, word: str) -> list[float] | None:
        vector = self.vocabulary.get(word)
        return vector.tolist() if vector is not None else None

    @classmethod
    def from_file(cls, path: str | Path, dimensions: int | None = None) -> "GloveFileProvider":
        """Load a GloVe text file. Raises FileNotFoundError if it does not exist."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"GloVe file not found: {path}")

        logger.info(f"Loading GloVe vectors from {path}...")
        with path.open(encoding="utf-8") as f:
            vocabulary = parse_glove_lines(f, dimensions=dimensions)
        logger.info(f"Loaded {len(vocabulary)} words")

        return cls(vocabulary, source=str(path))
