"""
Test suite for rigidmotion

Contains:
- tests/unit/          : Unit tests for individual modules
"""
