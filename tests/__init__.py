"""
Test suite for euclid-rings

Contains:
- tests/unit/      : Unit tests for individual modules
- tests/property/  : Property-based tests (hypothesis) for ring invariants
"""
