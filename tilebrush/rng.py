"""Lagged Fibonacci generator of doubles in [0, 1), in independent instances."""

from __future__ import annotations

_QUALITY = 19
_TT = 7
_KK = 10
_LL = 7
_ULP = 2.0 ** -52


def _mod_sum(x: float, y: float) -> float:
    """(x + y) mod 1.0 for non-negative arguments."""
    s = x + y
    return s - int(s)


class RngDouble:
    """Subtractive lagged Fibonacci generator with its own state."""

    def __init__(self, seed: int = 0) -> None:
        self._ran_u = [0.0] * _KK
        self._buf: list[float] = [-1.0]
        self._pos = 0
        self.set_seed(seed)

    def get_array(self, n: int) -> list[float]:
        """Return ``n`` fresh values and advance the generator state."""
        if n < _KK:
            raise ValueError(f"need at least {_KK} values, got {n}")
        aa = list(self._ran_u) + [0.0] * (n - _KK)
        for j in range(_KK, n):
            aa[j] = _mod_sum(aa[j - _KK], aa[j - _LL])
        ran_u = self._ran_u
        j = n
        for i in range(_LL):
            ran_u[i] = _mod_sum(aa[j - _KK], aa[j - _LL])
            j += 1
        for i in range(_LL, _KK):
            ran_u[i] = _mod_sum(aa[j - _KK], ran_u[i - _LL])
            j += 1
        return aa

    def set_seed(self, seed: int) -> None:
        """Reset the generator from ``seed``; only its low 30 bits matter."""
        seed &= 0x3FFFFFFF
        u = [0.0] * (_KK + _KK - 1)
        ss = 2.0 * _ULP * (seed + 2)
        for j in range(_KK):
            u[j] = ss
            ss += ss
            if ss >= 1.0:
                ss -= 1.0 - 2 * _ULP
        u[1] += _ULP

        s = seed
        t = _TT - 1
        while t:
            for j in range(_KK - 1, 0, -1):
                u[j + j] = u[j]
                u[j + j - 1] = 0.0
            for j in range(_KK + _KK - 2, _KK - 1, -1):
                u[j - (_KK - _LL)] = _mod_sum(u[j - (_KK - _LL)], u[j])
                u[j - _KK] = _mod_sum(u[j - _KK], u[j])
            if s & 1:
                for j in range(_KK, 0, -1):
                    u[j] = u[j - 1]
                u[0] = u[_KK]
                u[_LL] = _mod_sum(u[_LL], u[_KK])
            if s:
                s >>= 1
            else:
                t -= 1

        for j in range(_LL):
            self._ran_u[j + _KK - _LL] = u[j]
        for j in range(_LL, _KK):
            self._ran_u[j - _LL] = u[j]
        for _ in range(10):
            self.get_array(_KK + _KK - 1)
        self._buf = [-1.0]
        self._pos = 0

    def _cycle(self) -> float:
        buf = self.get_array(_QUALITY)
        buf[_KK] = -1.0
        self._buf = buf
        self._pos = 1
        return buf[0]

    def next(self) -> float:
        """Return the next value in [0, 1)."""
        value = self._buf[self._pos]
        if value >= 0:
            self._pos += 1
            return value
        return self._cycle()

    def __iter__(self) -> "RngDouble":
        return self

    def __next__(self) -> float:
        return self.next()