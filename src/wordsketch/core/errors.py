# errors.py
"""Exception types raised by the streaming sketch pipeline."""


class WordSketchError(Exception):
    """Base class for every fatal error raised by wordsketch."""


class ConfigurationError(WordSketchError, ValueError):
    """Invalid configuration: unknown selector, bad numeric value, unknown key.

    Always raised before any stream processing starts.
    """


class LexiconFormatError(WordSketchError, ValueError):
    """A lexicon line does not match ``word<TAB>integerPolarity``."""

    def __init__(self, source: str, line_no: int, line: str, reason: str):
        self.source = source
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(
            f"{source}:{line_no}: {reason} in {line!r} "
            f"(expected 'word<TAB>integerPolarity')"
        )


class SketchInvariantError(WordSketchError, RuntimeError):
    """A context name fell outside the pre-populated hashing bins."""
