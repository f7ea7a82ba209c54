"""Core Layer — pure domain logic, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic (errors carry a creation timestamp)

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
