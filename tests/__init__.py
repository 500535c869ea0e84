"""
Test suite for the survey ledger validator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
