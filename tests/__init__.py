"""
Test suite for optkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
