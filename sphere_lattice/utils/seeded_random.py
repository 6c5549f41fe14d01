"""
Seeded random number stream.

Thin glue between numpy's PCG64 bit generator and this project, so the engine
can be switched without touching the lattice code.

The seed may be any value built from None, bool, int, float, str, bytes and
tuples of those. It is serialized to a canonical type-tagged byte string and
hashed with SHA-256. The digest is loaded straight into the PCG64 state and
increment, which keeps the draw sequence identical across processes and
platforms (Python's own ``hash()`` is salted per process and cannot be used).

Reference draws, pinned in the tests:

    SeededStream(123).next_u32()  -> 3523070954, 1601668044, 2514396902, ...
"""

import hashlib
from typing import Hashable

import numpy as np

_UINT32_RANGE = 2 ** 32


def _canonical_bytes(seed: Hashable) -> bytes:
    # bool before int, bool is a subclass of int
    if seed is None:
        return b"none:"
    if isinstance(seed, bool):
        return f"bool:{int(seed)}".encode()
    if isinstance(seed, int):
        return f"int:{seed}".encode()
    if isinstance(seed, float):
        return f"float:{seed!r}".encode()
    if isinstance(seed, str):
        return f"str:{seed}".encode("utf-8")
    if isinstance(seed, bytes):
        return b"bytes:" + seed
    if isinstance(seed, tuple):
        parts = [_canonical_bytes(item) for item in seed]
        return b"tuple:" + b"".join(len(part).to_bytes(4, "big") + part for part in parts)
    raise TypeError(f"Unsupported seed type: {type(seed).__name__}")


def seed_digest(seed: Hashable) -> bytes:
    """SHA-256 digest of the canonical byte form of a seed."""
    return hashlib.sha256(_canonical_bytes(seed)).digest()


class SeededStream:
    """Deterministic stream of pseudo-random numbers keyed by a seed.

    Each instance exclusively owns its engine, there is no reseeding.

    Example:
        >>> stream = SeededStream("Hello")
        >>> stream.seed
        'Hello'
    """

    def __init__(self, seed: Hashable):
        digest = seed_digest(seed)
        self._seed = seed
        self._digest = digest
        self._bit_generator = np.random.PCG64(0)
        self._bit_generator.state = {
            "bit_generator": "PCG64",
            "state": {
                "state": int.from_bytes(digest[:16], "big"),
                "inc": int.from_bytes(digest[16:], "big") | 1,
            },
            "has_uint32": 0,
            "uinteger": 0,
        }

    @property
    def seed(self) -> Hashable:
        """The seed this stream was created with."""
        return self._seed

    def next_u32(self) -> int:
        """Next unsigned 32-bit integer, the high half of a 64-bit PCG64 output."""
        return int(self._bit_generator.random_raw()) >> 32

    def next_unit(self) -> float:
        """Next float in [0, 1)."""
        return self.next_u32() / _UINT32_RANGE

    def __eq__(self, other) -> bool:
        if not isinstance(other, SeededStream):
            return NotImplemented
        return self._digest == other._digest

    def __hash__(self) -> int:
        return hash(self._digest)

    def __repr__(self) -> str:
        return f"SeededStream(seed={self._seed!r})"
