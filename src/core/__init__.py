"""
Core domain models, integer primitives, and contracts.

This module contains the digit-level arithmetic (decomposition and
convolution multiplication) that is independent of the command-line driver.
"""
