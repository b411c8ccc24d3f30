"""Solutions to a set of short string and geometry tasks."""

from __future__ import annotations

import math
from string import ascii_lowercase

_PI = 3.141592654
_BIT_LIMIT = 25


def _top_bit(value: int) -> int:
    low = value & ((1 << _BIT_LIMIT) - 1)
    return max(0, low.bit_length() - 1)


def feasible_positions(n: int) -> str:
    """A ``'1'``/``'0'`` flag for each of the ``n`` positions that can win."""
    if n < 1:
        raise ValueError("n must be positive")
    flags = []
    for i in range(1, n + 1):
        x, y = i - 1, n - i
        good = (x & y) == 0 and _top_bit(x) < n and _top_bit(y) < n
        flags.append("1" if good else "0")
    return "".join(flags)


def letter_mapping(source: str, target: str) -> str | None:
    """A 26-letter substitution turning ``source`` into ``target``.

    Letters not fixed by the strings take the smallest unused letters in
    order.  Returns None when no mapping exists.
    """
    if len(source) != len(target):
        return None
    if any(ch not in ascii_lowercase for ch in source + target):
        raise ValueError("only lowercase letters are supported")
    fixed: dict[str, set[str]] = {}
    for s, t in zip(source, target):
        fixed.setdefault(s, set()).add(t)
    if any(len(images) > 1 for images in fixed.values()):
        return None
    mapping = {s: next(iter(images)) for s, images in fixed.items()}
    used = set(mapping.values())
    spare = (ch for ch in ascii_lowercase if ch not in used)
    return "".join(mapping[ch] if ch in mapping else next(spare) for ch in ascii_lowercase)


def recover_operand(a: str, c: str, result: str) -> str:
    """The binary string of per-bit flags derived from ``a``, ``c`` and ``result``."""
    if not len(a) == len(c) == len(result):
        raise ValueError("all three strings must have the same length")
    bits = []
    for x, y, r in zip(a, c, result):
        if r == "0":
            ok = x == "1" or x != y
        else:
            ok = x == "0" or x == y
        bits.append("1" if ok else "0")
    return "".join(bits)


def pentagon_vertices(x: float, y: float, d: float) -> list[tuple[float, float]]:
    """The four remaining vertices of the star pentagon around ``(x, y)``.

    Returned in the order D, B, E, C.
    """
    xc, yc = d * math.cos(-_PI / 5), d * math.sin(-_PI / 5)
    xd, yd = d * math.cos(-4 * _PI / 5), d * math.sin(-4 * _PI / 5)
    side = math.hypot(xc - xd, yc - yd)
    xb, yb = -d / 2, side * math.sin(-1.8849557)
    xe, ye = -xb, yb
    return [
        (xd + x, yd + y),
        (xb + x, yb + y),
        (xe + x, ye + y),
        (xc + x, yc + y),
    ]