"""Fast pseudo-random generators and per-thread sampling helpers."""

from __future__ import annotations

import threading
from typing import Iterable

from prismtrace.vector import Vector3D

DEFAULT_SEED = 1234567890

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_JUMP = (0x8764000B, 0xF542D2D3, 0x6FA035C3, 0x77F2DB5B)
_LONG_JUMP = (0xB523952E, 0x0B6F099F, 0xCCF5A0EF, 0x1C580662)


def rotl(x: int, s: int) -> int:
    """Rotate a 32-bit value left by ``s`` bits."""
    x &= _MASK32
    return ((x << s) | (x >> (32 - s))) & _MASK32


class SplitMix64:
    """SplitMix64 generator producing 64-bit values."""

    MIN = 0
    MAX = _MASK64

    __slots__ = ("state",)

    def __init__(self, state: int = DEFAULT_SEED) -> None:
        self.state = state & _MASK64

    def next(self) -> int:
        self.state = (self.state + 0x9E3779B97F4A7C15) & _MASK64
        z = self.state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
        return z ^ (z >> 31)

    def __iter__(self) -> SplitMix64:
        return self

    __next__ = next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SplitMix64):
            return NotImplemented
        return self.state == other.state


class Xoshiro128Plus:
    """xoshiro128+ generator producing 32-bit values."""

    MIN = 0
    MAX = _MASK32

    __slots__ = ("_state",)

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        splitmix = SplitMix64(seed)
        self._state = [splitmix.next() & _MASK32 for _ in range(4)]

    @property
    def state(self) -> tuple[int, int, int, int]:
        return tuple(self._state)

    def next(self) -> int:
        s = self._state
        result = (s[0] + s[3]) & _MASK32
        t = (s[1] << 9) & _MASK32
        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rotl(s[3], 11)
        return result

    def __iter__(self) -> Xoshiro128Plus:
        return self

    __next__ = next

    def _advance(self, table: Iterable[int]) -> None:
        accumulated = [0, 0, 0, 0]
        for word in table:
            for bit in range(32):
                if word & (1 << bit):
                    accumulated = [a ^ s for a, s in zip(accumulated, self._state)]
                self.next()
        self._state = accumulated

    def jump(self) -> None:
        """Advance as if by 2**64 calls to ``next``."""
        self._advance(_JUMP)

    def long_jump(self) -> None:
        """Advance as if by 2**96 calls to ``next``."""
        self._advance(_LONG_JUMP)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Xoshiro128Plus):
            return NotImplemented
        return self._state == other._state


_local = threading.local()


def _generator() -> Xoshiro128Plus:
    gen = getattr(_local, "rng", None)
    if gen is None:
        gen = Xoshiro128Plus()
        _local.rng = gen
    return gen


def seed(value: int) -> None:
    """Reseed the calling thread's generator."""
    _local.rng = Xoshiro128Plus(value)


def gen_int() -> int:
    return _generator().next()


def gen_float(low: float = 0.0, high: float = 1.0) -> float:
    """Uniform float in ``[low, high)``."""
    unit = (_generator().next() >> 8) * 2.0**-24
    return low + (high - low) * unit


def gen_vec(low: float = 0.0, high: float = 1.0) -> Vector3D:
    return Vector3D(gen_float(low, high), gen_float(low, high), gen_float(low, high))


def unit_sphere() -> Vector3D:
    """A random point strictly inside the unit sphere."""
    while True:
        p = gen_vec(-1.0, 1.0)
        if p.length_squared() < 1.0:
            return p


def unit_vector() -> Vector3D:
    """A random direction of length one."""
    return unit_sphere().unit()