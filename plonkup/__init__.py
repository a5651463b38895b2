"""Field arithmetic, lookup tables and permutation arguments for PLONK-style proofs over BLS12-381."""

__version__ = "0.1.0"