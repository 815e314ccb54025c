"""Planar geometry primitives used by the scan checks."""
