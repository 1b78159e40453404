"""
Test suite for splitcomplex

Contains:
- tests/unit/          : Unit tests for individual modules
"""
