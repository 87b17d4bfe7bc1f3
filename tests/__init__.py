"""
Test suite for numera

Contains:
- tests/unit/          : Unit tests for individual modules
"""
