"""
Criterion records module.

Typed output records for each criterion variant, the closed set of criterion
type codes, and the per-variant field setter tables.
"""
