# vocabulary.py
"""
Capacity-bounded vocabulary of word representations.

Admission is first-come-first-served: once ``capacity`` words are held every
new word shares the fallback representation, which is never counted. Nothing
is ever evicted.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator

from .context_index import UNKNOWN
from .errors import SketchInvariantError


@dataclass
class WordRepresentation:
    word: str
    occurrence_count: int = 0
    context_counts: Dict[str, int] = field(default_factory=dict)
    is_full: bool = False


def add_context(
    rep: WordRepresentation, name: str, context_size: int, hashing: bool = False
) -> str:
    """Count one co-occurrence of ``name`` with ``rep``'s word.

    A word tracks at most ``context_size - 1`` named features; the next unseen
    name goes to the word's own unknown bucket and the dictionary is marked
    full, after which every unseen name lands there too. Under hashing the
    dictionary may hold all ``context_size`` bins, so an unseen bin after that
    point means the hash/modulo contract was broken.

    Returns:
        The name whose count was incremented
    """
    counts = rep.context_counts
    if name in counts:
        counts[name] += 1
        return name

    if hashing:
        if rep.is_full:
            raise SketchInvariantError(
                f"Assigned context bin {name!r} is out of range for {rep.word!r}"
            )
        counts[name] = 1
        if len(counts) >= context_size:
            rep.is_full = True
        return name

    if not rep.is_full and len(counts) < context_size - 1:
        counts[name] = 1
        return name

    rep.is_full = True
    counts[UNKNOWN] = counts.get(UNKNOWN, 0) + 1
    return UNKNOWN


class Vocabulary:
    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self.fallback = WordRepresentation(UNKNOWN)
        self._words: Dict[str, WordRepresentation] = {}

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word in self._words

    def __getitem__(self, word: str) -> WordRepresentation:
        return self._words[word]

    def __iter__(self) -> Iterator[WordRepresentation]:
        return iter(self._words.values())

    @property
    def is_full(self) -> bool:
        return len(self._words) >= self.capacity

    def admit(self, word: str) -> WordRepresentation:
        """Count an occurrence of ``word`` and return its representation.

        Falls back to the shared unknown representation (uncounted) when the
        word is new and the vocabulary is full.
        """
        rep = self._words.get(word)
        if rep is not None:
            rep.occurrence_count += 1
            return rep
        if self.is_full:
            return self.fallback
        rep = WordRepresentation(word, occurrence_count=1)
        self._words[word] = rep
        return rep

    def lookup(self, word: str) -> WordRepresentation:
        """Representation of ``word`` or the fallback; never mutates."""
        return self._words.get(word, self.fallback)
