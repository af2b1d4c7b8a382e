"""Traversal engine shared by scan, copy and remove.

This package provides the Entry record produced by a walk, the per-entry PathFilter,
and the TreeWalker that walks a root depth-first in pre- or post-order.
"""
