"""
Core value types and numerical primitives.

Everything here is pure: no I/O, no shared mutable state.
"""
