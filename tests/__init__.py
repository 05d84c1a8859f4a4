"""
Test suite for pwlcurve

Contains:
- tests/unit/          : Unit tests for individual modules
"""
