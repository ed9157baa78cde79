# matrix_builder.py
"""
Word-context matrix builder.

Pulls corpus lines, slides a symmetric window over their tokens and keeps
each focus word's context counts up to date, emitting a weighted sparse
vector for the focus word after every update once the word has been seen
often enough.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Tuple

from .config import StreamConfig
from .context_index import ContextIndex
from .vectors import SparseFeatureVector, build_vector
from .vocabulary import Vocabulary, WordRepresentation, add_context
from .weighting import get_weighting
from ..text_utils import tokenize

logger = logging.getLogger(__name__)

Emission = Tuple[str, SparseFeatureVector]


def window_bounds(i: int, length: int, window_size: int) -> Tuple[int, int]:
    """Half-open window ``[start, end)`` around position ``i``, clamped to the line."""
    return max(0, i - window_size), min(length, i + window_size + 1)


class WordContextMatrix:
    def __init__(
        self,
        config: StreamConfig,
        tokenizer: Callable[[str], List[str]] = tokenize,
    ):
        """
        Args:
            config: Validated run configuration
            tokenizer: Splits a lower-cased line into ordered tokens
        """
        self.config = config
        self.tokenizer = tokenizer
        self.context_size = config.context_size
        self.window_size = config.window_size
        self.hashing = config.hashing
        self.weighting = get_weighting(config.weighting)

        self.vocabulary = Vocabulary(config.vocab_size)
        self.index = ContextIndex(config.context_size, hashing=self.hashing)

        self.tokens_seen = 0
        self.processed_lines = 0
        self.emitted = 0

    # ---------- per-line update ----------
    def process_line(self, line: str) -> List[Emission]:
        """Update counts from one corpus line and return its emissions in order."""
        self.processed_lines += 1
        tokens = self.tokenizer(line.lower())
        self.tokens_seen += len(tokens)

        for word in tokens:
            self.index.observe_token(word)
            self.vocabulary.admit(word)

        last = len(tokens) if self.config.focus_last_token else len(tokens) - 1
        out: List[Emission] = []
        for i in range(last):
            focus_word = tokens[i]
            focus = self.vocabulary.lookup(focus_word)
            start, end = window_bounds(i, len(tokens), self.window_size)
            for word in tokens[start:end]:
                if word != focus_word:
                    self._count_context(focus, word)

            if focus.occurrence_count >= self.config.min_occurrences:
                out.append((focus.word, self.vector_for(focus)))
        self.emitted += len(out)
        return out

    def _count_context(self, focus: WordRepresentation, word: str) -> None:
        add_context(focus, self.index.context_name(word), self.context_size, hashing=self.hashing)

    # ---------- vectors ----------
    def vector_for(self, rep: WordRepresentation) -> SparseFeatureVector:
        return build_vector(rep, self.index, self.weighting, self.tokens_seen, self.vocabulary)

    def build(self, lines: Iterable[str]) -> Iterator[Emission]:
        """Stream ``(word, vector)`` pairs for every line, one line at a time."""
        logger.info("Word-context matrix started")
        for line in lines:
            yield from self.process_line(line)
        logger.info(
            "Word-context matrix finished: %d lines, %d tokens, %d vectors, vocabulary=%d, contexts=%d",
            self.processed_lines,
            self.tokens_seen,
            self.emitted,
            len(self.vocabulary),
            len(self.index),
        )
