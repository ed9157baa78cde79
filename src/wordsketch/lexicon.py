#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Seed lexicon loading (the "oracle" of word polarities):
- Parse ``word<TAB>polarityScore`` lines; score < 0 -> negative, else positive
- Assign every word to the train or the test split
- Either one source with a split policy, or two sources (train file, test file)

Split policies for a single source:
- parity:    entries at even positions train, odd positions test (default)
- threshold: the first ``train_size`` entries train, the rest test
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .core.errors import ConfigurationError, LexiconFormatError

logger = logging.getLogger(__name__)

NEGATIVE, POSITIVE = "negative", "positive"
TRAIN, TEST = "train", "test"
SPLIT_POLICIES = ("parity", "threshold")


@dataclass(frozen=True)
class LexiconEntry:
    word: str
    polarity: str
    split: str

    @property
    def class_value(self) -> int:
        return 1 if self.polarity == POSITIVE else 0


def parse_line(line: str, source: str = "<lexicon>", line_no: int = 0) -> Tuple[str, str]:
    """Parse one lexicon line into ``(word, polarity)``.

    Raises:
        LexiconFormatError: missing polarity field or non-integer polarity
    """
    parts = line.split("\t")
    if len(parts) < 2 or not parts[0]:
        raise LexiconFormatError(source, line_no, line, "missing tab-separated polarity field")
    word, raw = parts[0], parts[1].strip()
    try:
        score = int(raw)
    except ValueError:
        raise LexiconFormatError(source, line_no, line, f"polarity {raw!r} is not an integer") from None
    return word, NEGATIVE if score < 0 else POSITIVE


def iter_entries(
    lines: Iterable[str], source: str = "<lexicon>", on_error: str = "raise"
) -> Iterator[Tuple[str, str]]:
    """Yield ``(word, polarity)`` for every non-blank line.

    ``on_error="skip"`` logs and drops malformed lines instead of failing,
    which changes which words end up in each split.
    """
    if on_error not in ("raise", "skip"):
        raise ConfigurationError(f"Unknown on_error policy: {on_error!r}")
    for line_no, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            yield parse_line(line, source, line_no)
        except LexiconFormatError as e:
            if on_error == "raise":
                raise
            logger.warning("Skipping malformed lexicon line: %s", e)


def _read(path: str | Path) -> Iterator[str]:
    with open(path, "r", encoding="utf-8") as f:
        yield from f


class Lexicon:
    """Immutable word -> (polarity, split) lookup."""

    def __init__(self, entries: Iterable[LexiconEntry] = ()):
        self._entries: Dict[str, LexiconEntry] = {}
        for e in entries:
            self._entries[e.word] = e

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: str) -> bool:
        return word in self._entries

    def get(self, word: str) -> Optional[LexiconEntry]:
        return self._entries.get(word)

    def words(self, split: Optional[str] = None) -> List[str]:
        return [w for w, e in self._entries.items() if split is None or e.split == split]

    def split_counts(self) -> Dict[str, int]:
        out = {TRAIN: 0, TEST: 0}
        for e in self._entries.values():
            out[e.split] += 1
        return out

    # ---------- builders ----------
    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        split_policy: str = "parity",
        train_size: Optional[int] = None,
        source: str = "<lexicon>",
        on_error: str = "raise",
    ) -> "Lexicon":
        """Single-source lexicon; the split policy decides train/test membership."""
        if split_policy not in SPLIT_POLICIES:
            raise ConfigurationError(
                f"Unknown split policy: {split_policy!r} (expected one of {list(SPLIT_POLICIES)})"
            )
        if split_policy == "threshold" and (train_size is None or train_size < 0):
            raise ConfigurationError("threshold split policy needs a non-negative train_size")

        entries = []
        for pos, (word, polarity) in enumerate(iter_entries(lines, source, on_error)):
            if split_policy == "parity":
                split = TRAIN if pos % 2 == 0 else TEST
            else:
                split = TRAIN if pos < train_size else TEST
            entries.append(LexiconEntry(word, polarity, split))
        return cls(entries)

    @classmethod
    def from_split_lines(
        cls,
        train_lines: Iterable[str],
        test_lines: Iterable[str],
        on_error: str = "raise",
        sources: Tuple[str, str] = ("<train lexicon>", "<test lexicon>"),
    ) -> "Lexicon":
        """Two-source lexicon: the first source trains, the second tests."""
        entries = [
            LexiconEntry(w, p, TRAIN) for w, p in iter_entries(train_lines, sources[0], on_error)
        ]
        entries += [
            LexiconEntry(w, p, TEST) for w, p in iter_entries(test_lines, sources[1], on_error)
        ]
        return cls(entries)

    @classmethod
    def load(
        cls,
        path: str | Path,
        test_path: str | Path | None = None,
        split_policy: str = "parity",
        train_size: Optional[int] = None,
        on_error: str = "raise",
    ) -> "Lexicon":
        """
        Load a lexicon from one or two UTF-8 files.

        Args:
            path: Lexicon file (the train file when ``test_path`` is given)
            test_path: Optional test lexicon file
            split_policy: "parity" or "threshold" (single source only)
            train_size: Number of leading entries that train under "threshold"
            on_error: "raise" (default) or "skip" for malformed lines

        Returns:
            Loaded Lexicon
        """
        for p in (path, test_path):
            if p is not None and not Path(p).exists():
                raise FileNotFoundError(f"Lexicon file not found: {p}")

        if test_path is None:
            lex = cls.from_lines(_read(path), split_policy, train_size, str(path), on_error)
        else:
            lex = cls.from_split_lines(_read(path), _read(test_path), on_error, (str(path), str(test_path)))
        logger.info("Loaded lexicon: %d words %s", len(lex), lex.split_counts())
        logger.debug("Held-out lexicon words: %s", ", ".join(lex.words(TEST)))
        return lex
