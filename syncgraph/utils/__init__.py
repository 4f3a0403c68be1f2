"""Utility helpers shared across syncgraph."""
