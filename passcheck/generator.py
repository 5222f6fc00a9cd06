"""Wordlist generation from a personal-attribute profile.

The pipeline tokenizes the profile, expands every token into case and leet
variations, appends a fixed suffix vocabulary, concatenates pairs of the
first few tokens and returns everything as one sorted, duplicate-free list.
"""

import itertools
import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Set

from .storage import STORAGE_KEY, KeyValueStore, save_wordlist
from .tokenizer import tokenize
from .variations import LEET_OPTIONS, expand, leet


logger = logging.getLogger(__name__)

SUFFIXES = ("123", "1", "!", "2024", "2025", "2026", "24", "25", "26")
LEET_SUFFIX = "!"
PAIR_TOKEN_LIMIT = 5


class CandidateSet:
    """Unordered accumulator that is linearized once by finalize()."""

    def __init__(self) -> None:
        self.seen: Set[str] = set()

    def __len__(self) -> int:
        return len(self.seen)

    def __contains__(self, value: object) -> bool:
        return value in self.seen

    def check_or_add(self, value: str) -> bool:
        """Insert value; return True if it was already present."""
        if value in self.seen:
            return True
        self.seen.add(value)
        return False

    def update(self, values: Iterable[str]) -> None:
        self.seen.update(values)

    def finalize(self) -> List[str]:
        return sorted(self.seen)


def augment(token: str) -> List[str]:
    """Every basic variation of token followed by every suffix."""
    return [variant + suffix for variant in expand(token) for suffix in SUFFIXES]


def leet_bang(token: str) -> str:
    return leet(token) + LEET_SUFFIX


def combine_pairs(tokens: Sequence[str]) -> List[str]:
    """Ordered concatenations of distinct tokens among the first PAIR_TOKEN_LIMIT.

    Each pair yields the raw concatenation and its all-lowercase form.
    """
    if len(tokens) < 2:
        return []
    head = list(tokens[:PAIR_TOKEN_LIMIT])
    combined: List[str] = []
    for first, second in itertools.permutations(head, 2):
        combined.append(first + second)
        combined.append(first.lower() + second.lower())
    return combined


def generate_password_list(record: Mapping[str, Optional[str]]) -> List[str]:
    tokens = tokenize(record)
    candidates = CandidateSet()
    for token in tokens:
        candidates.update(expand(token, LEET_OPTIONS))
        candidates.update(augment(token))
        candidates.check_or_add(leet_bang(token))
    candidates.update(combine_pairs(tokens))
    words = candidates.finalize()
    logger.debug("Generated %d candidate(s) from %d token(s)", len(words), len(tokens))
    return words


def generate_and_store(
    record: Mapping[str, Optional[str]],
    store: KeyValueStore,
    key: str = STORAGE_KEY,
) -> List[str]:
    """Generate the wordlist, then replace the stored value under key with it."""
    words = generate_password_list(record)
    save_wordlist(store, words, key=key)
    return words
