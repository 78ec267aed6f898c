"""Graph primitives.

This package provides the `Edge`, `Vertex` and `Graph` types, the scratch
matrix holder (`matrix`), invariant checks (`validation`) and NetworkX
conversion helpers (`convert`).
"""
