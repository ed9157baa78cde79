# hashing.py
"""Jenkins one-at-a-time hashing used by the sketching mode.

Arithmetic is 32-bit two's complement over *signed* bytes with arithmetic
right shifts, so bin assignments are stable across platforms and match the
historical sketches built from the same corpora.
"""

from typing import Union

_MASK = 0xFFFFFFFF


def _to_int32(x: int) -> int:
    x &= _MASK
    return x - 0x100000000 if x & 0x80000000 else x


def jenkins_hash(key: Union[str, bytes]) -> int:
    """One-at-a-time hash of ``key`` (UTF-8 encoded when given a str).

    Returns:
        Signed 32-bit hash value
    """
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    h = 0
    for b in data:
        h = _to_int32(h + (b - 256 if b > 127 else b))
        h = _to_int32(h + (h << 10))
        h = _to_int32(h ^ (h >> 6))
    h = _to_int32(h + (h << 3))
    h = _to_int32(h ^ (h >> 11))
    h = _to_int32(h + (h << 15))
    return h


def bin_id(key: Union[str, bytes], n_bins: int) -> int:
    """Bin of ``key`` in ``[0, n_bins)``: ``abs(hash) mod n_bins``."""
    if n_bins < 1:
        raise ValueError("n_bins must be >= 1")
    return abs(jenkins_hash(key)) % n_bins


def bin_name(index: int) -> str:
    return f"bin_{index}"
