"""Word similarity using a transformer sentence encoder.

Usage:
    cd lab
    python -m scripts.encoder_similarity [--backend sentence-transformers|openai] [--model NAME]
"""
import argparse
import logging
import os
import sys

# Add lab directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from services.providers import OpenAIEncoderProvider, SentenceEncoderProvider
from services.similarity import DEFAULT_WORDS, evaluate_sync, render_report

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

BACKENDS = ("sentence-transformers", "openai")


def build_provider(backend: str, model: str | None = None):
    """Create the encoder provider for a backend name."""
    if backend == "openai":
        return OpenAIEncoderProvider(model) if model else OpenAIEncoderProvider()
    if backend == "sentence-transformers":
        return SentenceEncoderProvider(model)
    raise ValueError(f"Unknown encoder backend: {backend}")


def main():
    parser = argparse.ArgumentParser(description="Pairwise word similarity with a sentence encoder")
    parser.add_argument("--backend", choices=BACKENDS, default="sentence-transformers", help="Encoder to use")
    parser.add_argument("--model", default=None, help="Model name (default depends on backend)")
    parser.add_argument("--words", nargs="+", default=DEFAULT_WORDS, help="Candidate words to compare")
    parser.add_argument("--preview-dims", type=int, default=5, help="Vector dims to print per word (default: 5)")
    args = parser.parse_args()

    provider = build_provider(args.backend, args.model)
    report = evaluate_sync(args.words, provider)

    print()
    print(render_report(report, preview_dims=args.preview_dims, title=f"ENCODER WORD SIMILARITY ({args.backend})"))


if __name__ == "__main__":
    main()
