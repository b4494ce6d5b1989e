"""Short, deterministic content fingerprint for ETags and cache keys.

Not cryptographic: a 32-bit FNV-1a hash over the text's code points,
prefixed with the text length.
"""

from __future__ import annotations

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193
_MASK_32 = 0xFFFFFFFF
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def content_hash(text: str) -> str:
    """Return ``"<length base36>-<fnv1a base36>"`` for *text*."""
    h = _FNV_OFFSET
    for ch in text:
        h ^= ord(ch)
        h = (h * _FNV_PRIME) & _MASK_32
    return f"{_base36(len(text))}-{_base36(h)}"
