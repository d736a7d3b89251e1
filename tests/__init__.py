"""
Test suite for stablefx

Contains:
- tests/unit/          : Unit tests for individual modules
"""
