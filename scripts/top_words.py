#!/usr/bin/env python3

"""
Print the most frequent words of a corpus, ranked the same way the
autocomplete API ranks its matches.
"""

import sys
import os

# Add the project root to the Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.app.completer import complete
from src.app.index import build_index, load_corpus


def top_words(corpus_file: str, limit: int = 25, prefix: str = "") -> list[tuple[str, int]]:
    """
    Rank the words of a corpus.

    Args:
        corpus_file: Path to the corpus text file
        limit: Number of words to return
        prefix: Only rank words starting with this prefix

    Returns:
        (word, count) pairs, most frequent first
    """
    index = build_index(load_corpus(corpus_file))
    return [(word, index[word]) for word in complete(index, prefix, limit)]


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Print the most frequent words of a corpus")
    parser.add_argument("corpus", help="Path to the corpus text file")
    parser.add_argument("--limit", type=int, default=25, help="Number of words to print (default: 25)")
    parser.add_argument("--prefix", default="", help="Only print words starting with this prefix")

    args = parser.parse_args()

    try:
        for word, count in top_words(args.corpus, args.limit, args.prefix):
            print(f"{word}\t{count}")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
