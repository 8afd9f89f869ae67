"""
Test suite for fixed-decimal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
