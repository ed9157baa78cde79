# context_index.py
"""
Context Index: stable integer dimensions for context-feature names.

Two mutually exclusive modes, fixed at construction:

- literal: names are raw context words, admitted in first-seen order
  starting at dimension 1 until ``capacity`` names (the reserved unknown
  feature included) are held. Later names route to dimension 0.
- hashing: the index is filled up front with ``bin_0 .. bin_{n-1}``; a word
  maps to its bin through the Jenkins hash and nothing else is ever admitted.

In hashing mode the index also keeps the global per-bin token counts that
PPMI reads as the feature marginal.
"""

from typing import Dict, List, Optional

from .errors import SketchInvariantError
from .hashing import bin_id, bin_name

UNKNOWN = "<unk>"
UNKNOWN_DIMENSION = 0


class ContextIndex:
    def __init__(self, capacity: int, hashing: bool = False):
        """
        Args:
            capacity: Total number of dimensions (``context_size``)
            hashing: Pre-populate hashing bins instead of admitting words
        """
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self.hashing = hashing
        self.name_to_dimension: Dict[str, int] = {}
        self._next_dimension = 1
        # global token counts per hashing bin
        self._feature_counts: List[int] = [0] * capacity if hashing else []

        if hashing:
            for i in range(capacity):
                self.name_to_dimension[bin_name(i)] = i

    def __len__(self) -> int:
        return len(self.name_to_dimension)

    def __contains__(self, name: str) -> bool:
        return name in self.name_to_dimension

    @property
    def is_full(self) -> bool:
        return len(self.name_to_dimension) >= self.capacity

    def context_name(self, word: str) -> str:
        """Name under which ``word`` is tracked as a context feature.

        Literal mode admits the word when there is room and returns it, or
        returns the unknown name when the index refuses it. Hashing mode
        returns the word's bin name.
        """
        if self.hashing:
            return bin_name(bin_id(word, self.capacity))
        if self.assign(word) == UNKNOWN_DIMENSION:
            return UNKNOWN
        return word

    def assign(self, name: str) -> int:
        """Dimension of ``name``, admitting it in literal mode when possible."""
        if self.hashing:
            return self.name_to_dimension[bin_name(bin_id(name, self.capacity))]

        if not self.name_to_dimension:
            self.name_to_dimension[UNKNOWN] = UNKNOWN_DIMENSION

        dim = self.name_to_dimension.get(name)
        if dim is not None:
            return dim
        if self.is_full:
            return UNKNOWN_DIMENSION

        dim = self._next_dimension
        self.name_to_dimension[name] = dim
        self._next_dimension += 1
        return dim

    def dimension_of(self, name: str) -> Optional[int]:
        """Pure lookup: the dimension of an already-known name, else None."""
        if name == UNKNOWN and not self.hashing:
            return UNKNOWN_DIMENSION
        return self.name_to_dimension.get(name)

    def resolve(self, name: str) -> int:
        """Dimension used when building a vector for a tracked context name.

        Raises:
            SketchInvariantError: in hashing mode, for a name outside the bins
        """
        dim = self.dimension_of(name)
        if dim is not None:
            return dim
        if self.hashing:
            raise SketchInvariantError(
                f"Context name {name!r} is not one of the {self.capacity} hashing bins"
            )
        return UNKNOWN_DIMENSION

    # ---------- global statistics ----------
    def observe_token(self, word: str) -> None:
        """Count a stream token toward its global hashing bin (hashing mode only)."""
        if self.hashing:
            self._feature_counts[bin_id(word, self.capacity)] += 1

    def feature_count(self, dimension: int) -> int:
        """Stream tokens counted toward a hashing bin; always 0 in literal mode."""
        return self._feature_counts[dimension] if self.hashing else 0
