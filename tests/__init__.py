"""
Test suite for difflow

Contains:
- tests/unit/          : Unit tests for individual modules
"""
