"""Word similarity using pre-trained GloVe vectors.

Usage:
    cd lab
    python -m scripts.glove_similarity [--glove-file models/glove.6B.50d.txt]
"""
import argparse
import logging
import os
import sys

# Add lab directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from services.providers import GloveFileProvider, default_glove_path
from services.similarity import DEFAULT_WORDS, evaluate_sync, render_report

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Pairwise word similarity with GloVe vectors")
    parser.add_argument("--glove-file", default=str(default_glove_path()), help="Path to a GloVe text file")
    parser.add_argument("--words", nargs="+", default=DEFAULT_WORDS, help="Candidate words to compare")
    parser.add_argument("--preview-dims", type=int, default=10, help="Vector dims to print per word (default: 10)")
    args = parser.parse_args()

    provider = GloveFileProvider.from_file(args.glove_file)
    report = evaluate_sync(args.words, provider)

    print()
    print(render_report(report, preview_dims=args.preview_dims, title="GLOVE WORD SIMILARITY"))


if __name__ == "__main__":
    main()
