"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - 404 outcomes are HTML pages; 403/500 are structured JSON

Design Decisions:
    - Thin routes delegate to services (ADR: ExMA impureim sandwich)
"""
