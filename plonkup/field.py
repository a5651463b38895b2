"""Arithmetic in the BLS12-381 scalar field, radix-2 evaluation domains and polynomials."""

from __future__ import annotations

import secrets
from functools import reduce
from typing import Iterable, Iterator, Optional, Sequence, Union

MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
"""Order of the BLS12-381 scalar field."""

TWO_ADICITY = 32
"""Largest ``s`` such that ``2**s`` divides ``MODULUS - 1``."""

GENERATOR = 7
"""Multiplicative generator of the scalar field."""

ROOT_OF_UNITY_VALUE = pow(GENERATOR, (MODULUS - 1) >> TWO_ADICITY, MODULUS)
"""A primitive ``2**TWO_ADICITY``-th root of unity."""

SCALAR_SIZE = 32
"""Length in bytes of an encoded scalar."""


class DomainSizeError(ValueError):
    """Raised when an evaluation domain would exceed the field's two-adicity."""


ScalarLike = Union["Scalar", int]


def _coerce(value: object) -> Optional[int]:
    if isinstance(value, Scalar):
        return value._value
    if isinstance(value, int) and not isinstance(value, bool):
        return value % MODULUS
    return None


class Scalar:
    """An element of the BLS12-381 scalar field."""

    __slots__ = ("_value",)

    def __init__(self, value: ScalarLike) -> None:
        reduced = _coerce(value)
        if reduced is None:
            raise TypeError(f"cannot build a scalar from {type(value).__name__}")
        self._value = reduced

    @classmethod
    def one(cls) -> "Scalar":
        return cls(1)

    @classmethod
    def zero(cls) -> "Scalar":
        return cls(0)

    @classmethod
    def random(cls, rng=None) -> "Scalar":
        """Draw a uniformly distributed scalar from ``rng`` (system randomness by default)."""
        source = rng if rng is not None else secrets.SystemRandom()
        return cls(source.getrandbits(512))

    def __add__(self, other: object) -> "Scalar":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Scalar(self._value + rhs)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Scalar":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Scalar(self._value - rhs)

    def __rsub__(self, other: object) -> "Scalar":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return Scalar(lhs - self._value)

    def __mul__(self, other: object) -> "Scalar":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Scalar(self._value * rhs)

    __rmul__ = __mul__

    def __neg__(self) -> "Scalar":
        return Scalar(-self._value)

    def __xor__(self, other: object) -> "Scalar":
        """Bitwise XOR of the canonical representations, reduced into the field."""
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Scalar(self._value ^ rhs)

    __rxor__ = __xor__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Scalar", self._value))

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"Scalar({self._value:#x})"

    def __format__(self, spec: str) -> str:
        """``x`` prints the little-endian encoding as hex; ``#x`` adds a ``0x`` prefix."""
        if spec in ("x", "#x"):
            digits = self.to_bytes().hex()
            return "0x" + digits if spec == "#x" else digits
        if not spec:
            return repr(self)
        return format(self._value, spec)

    def square(self) -> "Scalar":
        return Scalar(self._value * self._value)

    def pow(self, exponent: int) -> "Scalar":
        if exponent < 0:
            return self.invert().pow(-exponent)
        return Scalar(pow(self._value, exponent, MODULUS))

    def invert(self) -> "Scalar":
        if self._value == 0:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return Scalar(pow(self._value, MODULUS - 2, MODULUS))

    def to_bytes(self) -> bytes:
        """Canonical 32-byte little-endian encoding."""
        return self._value.to_bytes(SCALAR_SIZE, "little")

    @classmethod
    def from_bytes(cls, data: bytes) -> "Scalar":
        """Decode a canonical 32-byte little-endian encoding."""
        if len(data) != SCALAR_SIZE:
            raise ValueError(f"expected {SCALAR_SIZE} bytes, got {len(data)}")
        value = int.from_bytes(data, "little")
        if value >= MODULUS:
            raise ValueError("encoded value is not a canonical field element")
        return cls(value)


ROOT_OF_UNITY = Scalar(ROOT_OF_UNITY_VALUE)

# Coset constants keeping the permutation argument's wire subsets disjoint.
K1 = Scalar(7)
K2 = Scalar(13)
K3 = Scalar(17)


class Polynomial:
    """A dense univariate polynomial with coefficients in ascending degree order."""

    __slots__ = ("coeffs",)

    def __init__(self, coeffs: Iterable[ScalarLike] = ()) -> None:
        values = [Scalar(c) for c in coeffs]
        while values and not values[-1]:
            values.pop()
        self.coeffs = values

    def is_zero(self) -> bool:
        return not self.coeffs

    def degree(self) -> int:
        return max(len(self.coeffs) - 1, 0)

    def evaluate(self, point: ScalarLike) -> Scalar:
        x = Scalar(point)
        return reduce(lambda acc, c: acc * x + c, reversed(self.coeffs), Scalar.zero())

    def __len__(self) -> int:
        return len(self.coeffs)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self.coeffs)

    def __getitem__(self, index):
        return self.coeffs[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coeffs == other.coeffs

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        longer, shorter = sorted((self.coeffs, other.coeffs), key=len, reverse=True)
        padded = list(shorter) + [Scalar.zero()] * (len(longer) - len(shorter))
        return Polynomial(a + b for a, b in zip(longer, padded))

    def __neg__(self) -> "Polynomial":
        return Polynomial(-c for c in self.coeffs)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self + (-other)

    def __mul__(self, factor: object) -> "Polynomial":
        scalar = _coerce(factor)
        if scalar is None:
            return NotImplemented
        return Polynomial(c * scalar for c in self.coeffs)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Polynomial({self.coeffs!r})"


def _fft(values: Sequence[int], root: int) -> list[int]:
    size = len(values)
    if size == 1:
        return list(values)
    root_sq = root * root % MODULUS
    even = _fft(values[0::2], root_sq)
    odd = _fft(values[1::2], root_sq)
    half = size // 2
    out = [0] * size
    twiddle = 1
    for k, (e, o) in enumerate(zip(even, odd)):
        t = twiddle * o % MODULUS
        out[k] = (e + t) % MODULUS
        out[k + half] = (e - t) % MODULUS
        twiddle = twiddle * root % MODULUS
    return out


class EvaluationDomain:
    """Multiplicative subgroup of power-of-two order used for FFTs."""

    def __init__(self, num_coeffs: int) -> None:
        size = 1 << max(num_coeffs - 1, 0).bit_length()
        log_size = size.bit_length() - 1
        if log_size > TWO_ADICITY:
            raise DomainSizeError(
                f"a domain of size 2**{log_size} exceeds the two-adicity {TWO_ADICITY}"
            )
        self.size = size
        self.log_size = log_size
        self.group_gen = ROOT_OF_UNITY.pow(1 << (TWO_ADICITY - log_size))
        self.group_gen_inv = self.group_gen.invert()
        self.size_inv = Scalar(size).invert()
        self.generator = Scalar(GENERATOR)
        self.generator_inv = self.generator.invert()

    def __repr__(self) -> str:
        return f"EvaluationDomain(size={self.size})"

    def elements(self) -> Iterator[Scalar]:
        """Yield the domain's points ``1, w, w**2, ...`` in order."""
        current = Scalar.one()
        for _ in range(self.size):
            yield current
            current = current * self.group_gen

    def _resized(self, values: Iterable[ScalarLike]) -> list[int]:
        ints = [int(Scalar(v)) for v in values][: self.size]
        return ints + [0] * (self.size - len(ints))

    def fft(self, coeffs: Iterable[ScalarLike]) -> list[Scalar]:
        """Evaluate coefficients over the domain."""
        return [Scalar(v) for v in _fft(self._resized(coeffs), int(self.group_gen))]

    def ifft(self, evals: Iterable[ScalarLike]) -> list[Scalar]:
        """Interpolate evaluations over the domain back into coefficients."""
        raw = _fft(self._resized(evals), int(self.group_gen_inv))
        return [Scalar(v) * self.size_inv for v in raw]