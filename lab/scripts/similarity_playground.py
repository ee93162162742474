#!/usr/bin/env python3
"""Interactive script to test cosine similarity between two words or texts."""

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from scripts.encoder_similarity import BACKENDS, build_provider
from services.similarity import DegenerateVectorError, classify, cosine_similarity


def main():
    parser = argparse.ArgumentParser(description="Compare two texts interactively")
    parser.add_argument("--backend", choices=BACKENDS, default="sentence-transformers")
    parser.add_argument("--model", default=None)
    args = parser.parse_args()

    provider = build_provider(args.backend, args.model)

    print("=" * 60)
    print("Cosine Similarity Playground")
    print("=" * 60)
    print("Enter two words or texts to compare their semantic similarity.")
    print("Type 'quit' to exit.\n")

    while True:
        print("-" * 40)
        text1 = input("Text 1: ").strip()
        if text1.lower() == "quit":
            break

        text2 = input("Text 2: ").strip()
        if text2.lower() == "quit":
            break

        if not text1 or not text2:
            print("Please enter both texts.\n")
            continue

        print("\nComputing embeddings...")
        vectors = asyncio.run(provider.lookup_many([text1, text2]))

        try:
            similarity = cosine_similarity(vectors[text1], vectors[text2])
        except DegenerateVectorError as e:
            print(f"\n>>> Cannot compare: {e}\n")
            continue

        print(f"\n>>> Similarity: {similarity:.4f} ({classify(similarity).value})")
        print(f"    (Range: -1 to 1, where 1 = identical meaning)\n")


if __name__ == "__main__":
    main()
