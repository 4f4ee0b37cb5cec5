"""
Test suite for hullkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
