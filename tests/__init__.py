"""
Test suite for the digit convolution multiplier

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI driver
"""
