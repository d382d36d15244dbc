"""
Test suite for numrange

Contains:
- tests/unit/          : Unit tests for individual modules and range invariants
"""
