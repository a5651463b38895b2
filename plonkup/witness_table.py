"""Lookup queries made by the circuit, the ``f`` of the lookup argument."""

from __future__ import annotations

from dataclasses import dataclass, field

from plonkup.field import Scalar, ScalarLike
from plonkup.lookup_table import LookupTable
from plonkup.multiset import MultiSet


@dataclass
class WitnessTable:
    """Four columns of wire values queried against a lookup table."""

    f_1: MultiSet = field(default_factory=MultiSet)
    f_2: MultiSet = field(default_factory=MultiSet)
    f_3: MultiSet = field(default_factory=MultiSet)
    f_4: MultiSet = field(default_factory=MultiSet)

    def from_wire_values(
        self,
        left_wire_val: ScalarLike,
        right_wire_val: ScalarLike,
        output_wire_val: ScalarLike,
        fourth_wire_val: ScalarLike,
    ) -> None:
        """Append a query row directly, without consulting a lookup table."""
        self.f_1.push(left_wire_val)
        self.f_2.push(right_wire_val)
        self.f_3.push(output_wire_val)
        self.f_4.push(fourth_wire_val)

    def value_from_table(
        self,
        lookup_table: LookupTable,
        left_wire_val: ScalarLike,
        right_wire_val: ScalarLike,
        fourth_wire_val: ScalarLike,
    ) -> Scalar:
        """Look the output up in ``lookup_table`` and append the full row.

        Raises ``ElementNotIndexedError`` and leaves the table unchanged when no
        row matches.
        """
        output = lookup_table.lookup(left_wire_val, right_wire_val, fourth_wire_val)
        self.from_wire_values(left_wire_val, right_wire_val, output, fourth_wire_val)
        return output