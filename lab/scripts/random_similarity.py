"""Word similarity over a randomly-initialized embedding matrix.

Untrained vectors carry no meaning, so the labels here are a baseline for
comparing against the pre-trained providers.

Usage:
    cd lab
    python -m scripts.random_similarity [--dimensions 5] [--seed 42]
"""
import argparse
import logging
import os
import sys

# Add lab directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.providers import RandomEmbeddingProvider
from services.similarity import DEFAULT_WORDS, evaluate_sync, render_report

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Pairwise word similarity with random embeddings")
    parser.add_argument("--words", nargs="+", default=DEFAULT_WORDS, help="Candidate words to compare")
    parser.add_argument("--dimensions", type=int, default=5, help="Embedding size (default: 5)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible vectors")
    parser.add_argument("--preview-dims", type=int, default=5, help="Vector dims to print per word (default: 5)")
    args = parser.parse_args()

    provider = RandomEmbeddingProvider(args.words, dimensions=args.dimensions, seed=args.seed)
    report = evaluate_sync(args.words, provider)

    print()
    print(render_report(report, preview_dims=args.preview_dims, title="RANDOM EMBEDDING SIMILARITY"))


if __name__ == "__main__":
    main()
