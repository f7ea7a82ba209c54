"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe bodies at the system boundary only
"""
