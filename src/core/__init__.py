"""
Core value types: optional container, combinators, and example payloads.

This module contains the foundational building blocks that are independent
of external systems.
"""
