"""
Test suite for spade_vectors

Contains:
- tests/unit/          : Unit tests for individual modules
"""
