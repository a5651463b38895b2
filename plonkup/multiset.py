"""Multisets of field elements used by the lookup argument."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from plonkup.field import SCALAR_SIZE, EvaluationDomain, Polynomial, Scalar, ScalarLike


class ElementNotIndexedError(LookupError):
    """Raised when an element is not present where it is required to be."""


class MultiSet:
    """An ordered collection of scalars standing for wire values or table columns."""

    __slots__ = ("elements",)

    def __init__(self, elements: Iterable[ScalarLike] = ()) -> None:
        self.elements: list[Scalar] = [Scalar(e) for e in elements]

    @classmethod
    def from_bytes(cls, data: bytes) -> "MultiSet":
        """Decode consecutive 32-byte scalar encodings."""
        chunks = (data[i : i + SCALAR_SIZE] for i in range(0, len(data), SCALAR_SIZE))
        return cls(Scalar.from_bytes(chunk) for chunk in chunks)

    def to_bytes(self) -> bytes:
        """Encode every element, in order, as 32 little-endian bytes."""
        return b"".join(element.to_bytes() for element in self.elements)

    def pad(self, n: int) -> None:
        """Extend to ``n`` elements by repeating the first element."""
        if n <= 0 or n & (n - 1):
            raise ValueError(f"padding size {n} is not a power of two")
        if not self.elements:
            raise ValueError("cannot pad an empty multiset")
        if len(self.elements) > n:
            raise ValueError(
                f"multiset of {len(self.elements)} elements exceeds padding size {n}"
            )
        self.elements.extend([self.elements[0]] * (n - len(self.elements)))

    def push(self, value: ScalarLike) -> None:
        self.elements.append(Scalar(value))

    def last(self) -> Optional[Scalar]:
        """The last element, or ``None`` when the multiset is empty."""
        return self.elements[-1] if self.elements else None

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self.elements)

    def __getitem__(self, index):
        return self.elements[index]

    def __contains__(self, entry: object) -> bool:
        return entry in self.elements

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiSet):
            return NotImplemented
        return self.elements == other.elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MultiSet({self.elements!r})"

    def position(self, element: ScalarLike) -> Optional[int]:
        """Index of the first occurrence of ``element``, or ``None``."""
        target = Scalar(element)
        return next((i for i, x in enumerate(self.elements) if x == target), None)

    def sorted_concat(self, f: "MultiSet") -> "MultiSet":
        """Merge ``f`` into this multiset, placing each element next to its equal.

        Every element of ``f`` must already be present here.
        """
        merged = MultiSet(self.elements)
        for element in f:
            index = merged.position(element)
            if index is None:
                raise ElementNotIndexedError(f"{element!r} is not in the multiset")
            merged.elements.insert(index, element)
        return merged

    def contains_all(self, other: "MultiSet") -> bool:
        return all(item in self for item in other)

    def halve(self) -> tuple["MultiSet", "MultiSet"]:
        """Split into two halves sharing the middle element."""
        middle = len(self.elements) // 2
        return MultiSet(self.elements[: middle + 1]), MultiSet(self.elements[middle:])

    def halve_alternating(self) -> tuple["MultiSet", "MultiSet"]:
        """Split into the even-indexed and odd-indexed elements."""
        return MultiSet(self.elements[0::2]), MultiSet(self.elements[1::2])

    def to_polynomial(self, domain: EvaluationDomain) -> Polynomial:
        """Interpolate the elements as evaluations over ``domain``."""
        return Polynomial(domain.ifft(self.elements))

    @classmethod
    def compress_three_arity(
        cls, multisets: Sequence["MultiSet"], alpha: ScalarLike
    ) -> "MultiSet":
        """Combine three multisets elementwise as ``a + b*alpha + c*alpha^2``."""
        first, second, third = multisets
        alpha = Scalar(alpha)
        alpha_sq = alpha.square()
        return cls(a + b * alpha + c * alpha_sq for a, b, c in zip(first, second, third))

    @classmethod
    def compress_four_arity(
        cls, multisets: Sequence["MultiSet"], alpha: ScalarLike
    ) -> "MultiSet":
        """Combine four multisets elementwise as ``a + b*alpha + c*alpha^2 + d*alpha^3``."""
        first, second, third, fourth = multisets
        alpha = Scalar(alpha)
        alpha_sq = alpha.square()
        alpha_cu = alpha.pow(3)
        return cls(
            a + b * alpha + c * alpha_sq + d * alpha_cu
            for a, b, c, d in zip(first, second, third, fourth)
        )

    def __add__(self, other: "MultiSet") -> "MultiSet":
        if not isinstance(other, MultiSet):
            return NotImplemented
        return MultiSet(x + y for x, y in zip(self, other))

    def __mul__(self, other: "MultiSet") -> "MultiSet":
        if not isinstance(other, MultiSet):
            return NotImplemented
        return MultiSet(x * y for x, y in zip(self, other))