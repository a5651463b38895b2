"""Precomputed lookup tables of arity four, the ``t`` of the lookup argument."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Sequence

from plonkup.field import Scalar, ScalarLike
from plonkup.multiset import ElementNotIndexedError, MultiSet

Row = tuple[Scalar, Scalar, Scalar, Scalar]

_MAX_BITS = 64


def _bound(n: int) -> int:
    if not 0 <= n < _MAX_BITS:
        raise OverflowError(f"2**{n} does not fit in a 64-bit bound")
    return 1 << n


class LookupTable:
    """Rows ``(a, b, c, d)`` where ``c = g(a, b)`` and ``d`` tags the operation."""

    __slots__ = ("rows",)

    def __init__(self, rows: Iterable[Sequence[ScalarLike]] = ()) -> None:
        self.rows: list[Row] = [self._make_row(*row) for row in rows]

    @staticmethod
    def _make_row(a: ScalarLike, b: ScalarLike, c: ScalarLike, d: ScalarLike) -> Row:
        return (Scalar(a), Scalar(b), Scalar(c), Scalar(d))

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, index):
        return self.rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LookupTable):
            return NotImplemented
        return self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LookupTable({len(self.rows)} rows)"

    def insert_add_row(self, a: int, b: int, upper_bound: int) -> None:
        """Append ``(a, b, (a + b) mod upper_bound, 0)``."""
        self.rows.append(self._make_row(a, b, (a + b) % upper_bound, Scalar.zero()))

    def insert_special_row(
        self, a: ScalarLike, b: ScalarLike, c: ScalarLike, d: ScalarLike
    ) -> None:
        """Append an arbitrary row."""
        self.rows.append(self._make_row(a, b, c, d))

    def insert_mul_row(self, a: int, b: int, upper_bound: int) -> None:
        """Append ``(a, b, (a * b) mod upper_bound, 1)``."""
        self.rows.append(self._make_row(a, b, (a * b) % upper_bound, Scalar.one()))

    def insert_xor_row(self, a: int, b: int, upper_bound: int) -> None:
        """Append ``(a, b, (a ^ b) mod upper_bound, -1)``."""
        self.rows.append(self._make_row(a, b, (a ^ b) % upper_bound, -Scalar.one()))

    def insert_and_row(self, a: int, b: int, upper_bound: int) -> None:
        """Append ``(a, b, (a & b) mod upper_bound, 2)``."""
        self.rows.append(self._make_row(a, b, (a & b) % upper_bound, Scalar(2)))

    def _insert_multi(
        self, insert: Callable[[int, int, int], None], lower_bound: int, n: int
    ) -> None:
        upper_bound = _bound(n)
        values = range(lower_bound, upper_bound)
        for a in values:
            for b in values:
                insert(a, b, upper_bound)

    def insert_multi_add(self, lower_bound: int, n: int) -> None:
        """Add rows for every pair in ``lower_bound..2**n``."""
        self._insert_multi(self.insert_add_row, lower_bound, n)

    def insert_multi_mul(self, lower_bound: int, n: int) -> None:
        """Multiply rows for every pair in ``lower_bound..2**n``."""
        self._insert_multi(self.insert_mul_row, lower_bound, n)

    def insert_multi_xor(self, lower_bound: int, n: int) -> None:
        """XOR rows for every pair in ``lower_bound..2**n``."""
        self._insert_multi(self.insert_xor_row, lower_bound, n)

    def insert_multi_and(self, lower_bound: int, n: int) -> None:
        """AND rows for every pair in ``lower_bound..2**n``."""
        self._insert_multi(self.insert_and_row, lower_bound, n)

    def vec_to_multiset(self) -> tuple[MultiSet, MultiSet, MultiSet, MultiSet]:
        """Split the table into its four columns."""
        columns = tuple(zip(*self.rows)) if self.rows else ((), (), (), ())
        first, second, third, fourth = (MultiSet(column) for column in columns)
        return first, second, third, fourth

    def lookup(self, a: ScalarLike, b: ScalarLike, d: ScalarLike) -> Scalar:
        """Return ``c`` of the first row matching ``a``, ``b`` and ``d``."""
        key = (Scalar(a), Scalar(b), Scalar(d))
        for row_a, row_b, row_c, row_d in self.rows:
            if (row_a, row_b, row_d) == key:
                return row_c
        raise ElementNotIndexedError(f"no row matches a={a!r}, b={b!r}, d={d!r}")