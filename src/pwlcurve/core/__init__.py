"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks that are independent
of how curves are stored, loaded or presented.
"""
