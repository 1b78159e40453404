"""
Math modules for split-complex numbers.

- numerical_safeguards: tolerance constant and scalar comparison helpers
- arithmetic: linear operations, product, quadrance, inverse, quotient
- curvilinear: hyperbolic polar coordinates

Import from the submodules directly; the public surface is re-exported by
src.splitcomplex.
"""
