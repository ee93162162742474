"""Store GloVe word vectors in the vector database and query them back.

Expects a `word_vectors` table (word text primary key, embedding vector(50))
and a `match_word_vectors(query_embedding, match_threshold, match_count)`
function returning (word, similarity) rows.

Usage:
    cd lab
    python -m scripts.vector_db_similarity [--top-k 3]
"""
import argparse
import asyncio
import logging
import os
import sys

# Add lab directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from db import WordVectorQueries
from services.providers import GloveFileProvider, VectorDatabaseProvider, default_glove_path
from services.similarity import DEFAULT_WORDS, evaluate, render_neighbors, render_report

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


async def run(words: list[str], glove_file: str, dimensions: int, top_k: int, preview_dims: int):
    glove = GloveFileProvider.from_file(glove_file)
    provider = VectorDatabaseProvider(WordVectorQueries(), source=glove, dimensions=dimensions)

    stored = await provider.store(words)
    logger.info(f"Stored {len(stored)}/{len(words)} words in the vector database")

    report = await evaluate(words, provider)
    print()
    print(render_report(report, preview_dims=preview_dims, title="VECTOR DATABASE WORD SIMILARITY"))

    print()
    neighbors = await asyncio.gather(*[provider.nearest_words(word, top_k=top_k) for word in stored])
    for word, matches in zip(stored, neighbors):
        print(render_neighbors(word, matches))


def main():
    parser = argparse.ArgumentParser(description="Word similarity through a vector database round-trip")
    parser.add_argument("--glove-file", default=str(default_glove_path()), help="Path to a GloVe text file")
    parser.add_argument("--words", nargs="+", default=DEFAULT_WORDS, help="Candidate words to store and compare")
    parser.add_argument("--dimensions", type=int, default=50, help="Stored vector size (default: 50)")
    parser.add_argument("--top-k", type=int, default=3, help="Nearest words to list per word (default: 3)")
    parser.add_argument("--preview-dims", type=int, default=10, help="Vector dims to print per word (default: 10)")
    args = parser.parse_args()

    asyncio.run(run(args.words, args.glove_file, args.dimensions, args.top_k, args.preview_dims))


if __name__ == "__main__":
    main()
