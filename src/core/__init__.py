"""
Core numeric kinds and algebraic capabilities.

This package contains the numeric value types (src.core.numbers) and the
Ring / EuclideanRing capability hierarchy over them (src.core.algebra).
Everything here is pure and side-effect free.
"""
