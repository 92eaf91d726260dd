"""
Core domain models, checksum primitives, and contracts.

This module contains the routing transit number value type and the
building blocks it is validated with. Nothing here performs I/O.
"""
