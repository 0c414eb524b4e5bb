"""
Test suite for domain-kernel

Contains:
- tests/unit/          : Unit tests for individual modules
"""
