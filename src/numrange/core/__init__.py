"""
Core numeric domain, range primitives, value objects and contracts.

Pure functions and immutable models; the only shared mutable state is the
optional memoization cache.
"""
