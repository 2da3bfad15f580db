"""
Test suite for mcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
