"""
Word frequency index built once from a corpus.
"""

import logging
from collections import Counter
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Union

from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class FrequencyIndex(Mapping):
    """
    Read-only mapping of word -> number of occurrences in the corpus.

    Instances are created with FrequencyIndex.build() and never change
    afterwards, so any number of request handlers can read one concurrently.
    """

    __slots__ = ("_counts", "_total")

    def __init__(self, counts: Mapping):
        self._counts = MappingProxyType(dict(counts))
        self._total = sum(self._counts.values())

    @classmethod
    def build(cls, tokens: Iterable[str]) -> "FrequencyIndex":
        """
        Counts every distinct token.

        Args:
            tokens: Any iterable of tokens, including an empty one.

        Returns:
            A new index. Words that never appear have no entry.
        """
        return cls(Counter(tokens))

    @property
    def total(self) -> int:
        """Number of tokens the index was built from."""
        return self._total

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self):
        return f"<FrequencyIndex(words={len(self)}, total={self.total})>"


def build_index(corpus_text: str) -> FrequencyIndex:
    """Tokenizes the corpus text and counts the words."""
    tokens = tokenize(corpus_text)
    logger.info(f"Tokenized corpus into {len(tokens):,} words")
    return FrequencyIndex.build(tokens)


def load_corpus(path: Union[str, Path]) -> str:
    """
    Reads the corpus file into memory.

    Args:
        path: Path to a UTF-8 text file.

    Returns:
        The file contents. Undecodable bytes are replaced, the tokenizer
        drops them afterwards.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
    """
    corpus_path = Path(path)
    if not corpus_path.exists():
        raise FileNotFoundError(f"Corpus file not found: {corpus_path}")

    with open(corpus_path, 'r', encoding='utf-8', errors='replace') as f:
        text = f.read()

    logger.info(f"Successfully read corpus file {corpus_path}")
    return text
