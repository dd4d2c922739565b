"""
Test suite for borsanova

Contains:
- tests/unit/          : Unit tests for individual modules
"""
