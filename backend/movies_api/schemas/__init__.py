"""Pydantic Schemas: explicit serialization at the HTTP boundary.

Invariants:
    - Schemas describe API contracts only, never domain state
"""
