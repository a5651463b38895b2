"""Copy constraints: which wires share a variable, and the sigma permutations built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from plonkup.field import K1, K2, K3, EvaluationDomain, Polynomial, Scalar


class Wire(Enum):
    """The four wire columns of a gate."""

    LEFT = 0
    RIGHT = 1
    OUTPUT = 2
    FOURTH = 3

    @property
    def coset(self) -> Scalar:
        """Constant selecting the coset ``kH`` that encodes this column."""
        return _COSETS[self]


_COSETS = {
    Wire.LEFT: Scalar.one(),
    Wire.RIGHT: K1,
    Wire.OUTPUT: K2,
    Wire.FOURTH: K3,
}


@dataclass(frozen=True)
class WireData:
    """A wire column at a given gate index."""

    wire: Wire
    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"gate index {self.index} is negative")


@dataclass
class Permutation:
    """Maps every variable to the wires it is placed on."""

    variable_map: dict[int, list[WireData]] = field(default_factory=dict)

    def new_variable(self) -> int:
        """Allocate a fresh variable and return its index."""
        var = len(self.variable_map)
        self.variable_map[var] = []
        return var

    def add_variables_to_map(self, a: int, b: int, c: int, d: int, gate_index: int) -> None:
        """Place ``a``, ``b``, ``c`` and ``d`` on the four wires of gate ``gate_index``."""
        for var, wire in zip((a, b, c, d), Wire):
            self.add_variable_to_map(var, WireData(wire, gate_index))

    def add_variable_to_map(self, var: int, wire_data: WireData) -> None:
        """Record that ``var`` sits on ``wire_data``; the variable must exist."""
        wires = self.variable_map.get(var)
        if wires is None:
            raise KeyError(f"variable {var!r} has not been allocated")
        wires.append(wire_data)

    def compute_sigma_permutations(
        self, n: int
    ) -> tuple[list[WireData], list[WireData], list[WireData], list[WireData]]:
        """Build the four sigma mappings over ``n`` gates.

        Each wire is sent to the next wire holding the same variable, cycling
        back to the first one; wires of unused positions map to themselves.
        """
        sigmas = [[WireData(wire, i) for i in range(n)] for wire in Wire]
        for wires in self.variable_map.values():
            for current, following in zip(wires, wires[1:] + wires[:1]):
                sigmas[current.wire.value][current.index] = following
        left, right, output, fourth = sigmas
        return left, right, output, fourth

    def compute_permutation_lagrange(
        self, sigma_mapping: Iterable[WireData], domain: EvaluationDomain
    ) -> list[Scalar]:
        """Encode a sigma mapping as evaluations ``k * w**index`` over ``domain``."""
        roots = list(domain.elements())
        return [wd.wire.coset * roots[wd.index] for wd in sigma_mapping]

    def compute_sigma_polynomials(
        self, n: int, domain: EvaluationDomain
    ) -> tuple[Polynomial, Polynomial, Polynomial, Polynomial]:
        """Interpolate the four encoded sigma mappings into polynomials."""
        polys: Sequence[Polynomial] = [
            Polynomial(domain.ifft(self.compute_permutation_lagrange(sigma, domain)))
            for sigma in self.compute_sigma_permutations(n)
        ]
        first, second, third, fourth = polys
        return first, second, third, fourth