"""Graph primitives.

This package provides the value-compared edge types (`edge`) and the
thread-safe `SimpleGraph` container (`simple_graph`).
"""
