# config.py
"""
Run configuration for the word-context stream.

The values are plain integers and selector strings; the CLI layer (or a JSON
file) produces a dict and ``StreamConfig.from_dict`` validates it. Every
problem is reported as a ``ConfigurationError`` before the stream is touched.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigurationError

# Canonical selector -> accepted spellings
SKETCHING_ALIASES: Dict[str, set] = {
    "none": {"none", "literal", "off"},
    "hashing": {"hashing", "hash", "sketch"},
}
WEIGHTING_ALIASES: Dict[str, set] = {
    "none": {"none", "identity", "raw", "counts"},
    "normalized": {"normalized", "normalised", "norm", "minmax"},
    "ppmi": {"ppmi", "pmi"},
}
CLASSIFIER_ALIASES: Dict[str, set] = {
    "sgd": {"sgd", "logreg", "lr"},
    "projection-sgd": {"projection-sgd", "projection", "rp-sgd"},
}

# name -> smallest accepted value
_INT_FIELDS: Dict[str, int] = {
    "vocab_size": 1,
    "context_size": 1,
    "window_size": 1,
    "report_interval": 1,
    "min_occurrences": 1,
    "random_state": 0,
    "projection_percent": 1,
}


def canonical_selector(kind: str, value: Any, aliases: Dict[str, set]) -> str:
    """Map a user-supplied selector onto its canonical name.

    Args:
        kind: Selector name used in the error message (e.g. "weighting")
        value: Raw value from the CLI or config file
        aliases: Canonical name -> accepted spellings

    Returns:
        The canonical selector name

    Raises:
        ConfigurationError: if the value is not a recognised spelling
    """
    key = str(value).strip().lower()
    for canonical, spellings in aliases.items():
        if key in spellings:
            return canonical
    raise ConfigurationError(
        f"Unknown {kind} method: {value!r} (expected one of {sorted(aliases)})"
    )


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        out = value
    elif isinstance(value, float) and value.is_integer():
        out = int(value)
    elif isinstance(value, str):
        try:
            out = int(value.strip())
        except ValueError:
            raise ConfigurationError(
                f"{name} must be an integer, got {value!r}"
            ) from None
    else:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")

    minimum = _INT_FIELDS[name]
    if out < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {out}")
    return out


def _coerce_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "1", "yes"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "0", "no"}:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


@dataclass
class StreamConfig:
    """Validated settings for one streaming run.

    Defaults: a 100k word vocabulary, 10k context dimensions, a window
    radius of 4 and a report every 1000 classified words.
    """

    vocab_size: int = 100000
    context_size: int = 10000
    window_size: int = 4
    sketching: str = "none"
    weighting: str = "none"
    report_interval: int = 1000
    min_occurrences: int = 1
    focus_last_token: bool = False
    classifier: str = "sgd"
    random_state: int = 42
    projection_percent: int = 10

    def __post_init__(self):
        for name in _INT_FIELDS:
            setattr(self, name, _coerce_int(name, getattr(self, name)))
        self.focus_last_token = _coerce_bool("focus_last_token", self.focus_last_token)
        self.sketching = canonical_selector("sketching", self.sketching, SKETCHING_ALIASES)
        self.weighting = canonical_selector("weighting", self.weighting, WEIGHTING_ALIASES)
        self.classifier = canonical_selector("classifier", self.classifier, CLASSIFIER_ALIASES)

    @property
    def hashing(self) -> bool:
        return self.sketching == "hashing"

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "StreamConfig":
        """Build a config from a plain dict, rejecting unknown keys.

        ``None`` values are treated as "use the default", which lets the CLI
        pass every flag through unchanged.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {unknown}")
        return cls(**{k: v for k, v in raw.items() if v is not None})

    @classmethod
    def from_json(cls, path: str | Path) -> "StreamConfig":
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {path} is not valid JSON: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config file {path} must hold a JSON object")
        return cls.from_dict(raw)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
