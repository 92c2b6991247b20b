"""
Corpus tokenizer.
Turns raw text into lowercase alphabetic words.
"""

import re
from typing import List

# Whitespace is space, \t, \n, \f and \r. Anything else, \v and non-ASCII
# characters included, is dropped like punctuation.
NON_ALPHABETIC = re.compile(r"[^a-zA-Z \t\n\f\r]")
WHITESPACE = re.compile(r"[ \t\n\f\r]+")


def tokenize(text: str) -> List[str]:
    """
    Splits text into lowercase alphabetic tokens.

    Every character that is not a letter or whitespace is dropped without
    leaving a separator behind, so "don't" becomes "dont". The remainder is
    lowercased and split on runs of whitespace.

    Args:
        text: Arbitrary text, possibly empty.

    Returns:
        The tokens in the order they appear in the text. Never contains
        empty strings.
    """
    letters_only = NON_ALPHABETIC.sub("", text).lower()
    return [word for word in WHITESPACE.split(letters_only) if word]
