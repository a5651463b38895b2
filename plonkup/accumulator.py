"""Grand-product accumulators for the copy-constraint and lookup arguments."""

from __future__ import annotations

from itertools import accumulate
from operator import mul
from typing import Iterable, Sequence

from plonkup.field import K1, K2, K3, EvaluationDomain, Polynomial, Scalar, ScalarLike

_COSET_CONSTANTS = (Scalar.one(), K1, K2, K3)


def _as_scalars(values: Iterable[ScalarLike], name: str, size: int) -> list[Scalar]:
    scalars = [Scalar(v) for v in values]
    if len(scalars) != size:
        raise ValueError(f"{name} has {len(scalars)} values, expected {size}")
    return scalars


def _running_products(factors: Iterable[Scalar], n: int) -> list[Scalar]:
    """``[1, f0, f0*f1, ...]`` truncated to ``n`` entries."""
    return list(accumulate(factors, mul, initial=Scalar.one()))[:n]


def compute_permutation_vec(
    domain: EvaluationDomain,
    wires: Sequence[Iterable[ScalarLike]],
    beta: ScalarLike,
    gamma: ScalarLike,
    sigma_polys: Sequence[Polynomial],
) -> list[Scalar]:
    """Evaluations of the copy-permutation accumulator ``z`` over ``domain``.

    ``wires`` holds the four wire columns and ``sigma_polys`` the four sigma
    polynomials. Entry ``i`` is the product over gates ``j < i`` of
    ``prod_k (w_k + beta*k*root_j + gamma) / prod_k (w_k + beta*sigma_k + gamma)``.
    """
    n = domain.size
    if len(wires) != 4 or len(sigma_polys) != 4:
        raise ValueError("exactly four wire columns and four sigma polynomials are required")
    beta = Scalar(beta)
    gamma = Scalar(gamma)

    wire_columns = [
        _as_scalars(column, f"wire column {index}", n) for index, column in enumerate(wires)
    ]
    sigma_columns = [domain.fft(poly) for poly in sigma_polys]
    roots = list(domain.elements())

    def gate_ratio(root: Scalar, gate_wires: tuple, gate_sigmas: tuple) -> Scalar:
        numerator = Scalar.one()
        denominator = Scalar.one()
        for wire, sigma, k in zip(gate_wires, gate_sigmas, _COSET_CONSTANTS):
            numerator *= wire + beta * k * root + gamma
            denominator *= wire + beta * sigma + gamma
        return numerator * denominator.invert()

    ratios = (
        gate_ratio(root, gate_wires, gate_sigmas)
        for root, gate_wires, gate_sigmas in zip(
            roots, zip(*wire_columns), zip(*sigma_columns)
        )
    )
    return _running_products(ratios, n)


def _lookup_numerator(
    delta: Scalar, epsilon: Scalar, f: Scalar, t: Scalar, t_next: Scalar
) -> Scalar:
    one_plus_delta = Scalar.one() + delta
    return (epsilon + f) * one_plus_delta * (epsilon * one_plus_delta + t + delta * t_next)


def _lookup_denominator(
    delta: Scalar, epsilon: Scalar, h_1: Scalar, h_1_next: Scalar, h_2: Scalar
) -> Scalar:
    epsilon_one_plus_delta = epsilon * (Scalar.one() + delta)
    first = epsilon_one_plus_delta + h_1 + h_2 * delta
    second = epsilon_one_plus_delta + h_2 + h_1_next * delta
    return first * second


def compute_lookup_permutation_vec(
    domain: EvaluationDomain,
    f: Iterable[ScalarLike],
    t: Iterable[ScalarLike],
    h_1: Iterable[ScalarLike],
    h_2: Iterable[ScalarLike],
    delta: ScalarLike,
    epsilon: ScalarLike,
) -> list[Scalar]:
    """Evaluations of the lookup accumulator over ``domain``.

    ``f`` is the compressed query column, ``t`` the compressed table, and
    ``h_1``/``h_2`` the two halves of their sorted concatenation; all must have
    the domain's size.
    """
    n = domain.size
    f_vals = _as_scalars(f, "f", n)
    t_vals = _as_scalars(t, "t", n)
    h_1_vals = _as_scalars(h_1, "h_1", n)
    h_2_vals = _as_scalars(h_2, "h_2", n)
    delta = Scalar(delta)
    epsilon = Scalar(epsilon)

    t_next = t_vals[1:] + t_vals[:1]
    h_1_next = h_1_vals[1:] + h_1_vals[:1]

    ratios = (
        _lookup_numerator(delta, epsilon, f_i, t_i, t_next_i)
        * _lookup_denominator(delta, epsilon, h_1_i, h_1_next_i, h_2_i).invert()
        for f_i, t_i, t_next_i, h_1_i, h_1_next_i, h_2_i in zip(
            f_vals, t_vals, t_next, h_1_vals, h_1_next, h_2_vals
        )
    )
    return _running_products(ratios, n)