"""
In-memory autocomplete service for corpus words.
Loads a corpus once, counts its words and answers ranked prefix queries.
"""

import time
from pathlib import Path
from typing import List, Optional, Union
import logging

from .completer import complete
from .index import FrequencyIndex, build_index, load_corpus

logger = logging.getLogger(__name__)


class WordAutocomplete:
    """
    Autocomplete service for the words of a text corpus.
    The frequency index is built once by load_corpus() and only read afterwards.
    """

    def __init__(self, corpus_file: Union[str, Path]):
        """
        Initialize the autocomplete service. Nothing is read until load_corpus().

        Args:
            corpus_file: Path to the corpus text file
        """
        self.corpus_file = Path(corpus_file)
        self._index: Optional[FrequencyIndex] = None
        self.load_time: Optional[float] = None

    @property
    def loaded(self) -> bool:
        return self._index is not None

    @property
    def index(self) -> FrequencyIndex:
        if self._index is None:
            raise RuntimeError("Corpus not loaded. Call load_corpus() first.")
        return self._index

    def load_corpus(self) -> None:
        """
        Read the corpus and build the frequency index.
        This must be called once at application startup, before serving.

        Raises:
            FileNotFoundError: If the corpus file does not exist.
            OSError: If the corpus file cannot be read.
        """
        if self.loaded:
            logger.info("Corpus already loaded")
            return

        start_time = time.time()
        logger.info(f"Loading corpus from {self.corpus_file}...")

        text = load_corpus(self.corpus_file)
        self._index = build_index(text)

        self.load_time = time.time() - start_time
        logger.info(
            f"Indexed {len(self._index):,} distinct words "
            f"({self._index.total:,} total) in {self.load_time:.3f} seconds"
        )

    def search(self, query: str, limit: int = 25) -> List[str]:
        """
        Find the most frequent corpus words starting with the given query.

        Args:
            query: The prefix to match, case-sensitive
            limit: Maximum number of results to return

        Returns:
            Matching words, most frequent first
        """
        return complete(self.index, query, limit)

    def get_stats(self) -> dict:
        """
        Get statistics about the autocomplete service.

        Returns:
            Dictionary with stats
        """
        return {
            "loaded": self.loaded,
            "distinct_words": len(self._index) if self.loaded else 0,
            "total_words": self._index.total if self.loaded else 0,
            "load_time_seconds": self.load_time,
            "corpus_file": str(self.corpus_file),
            "file_exists": self.corpus_file.exists()
        }
