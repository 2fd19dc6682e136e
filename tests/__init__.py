"""
Test suite for bizmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
