"""
Test suite for base32_crockford

Contains:
- tests/unit/          : Unit tests for individual modules
"""
