"""Service Layer — imperative shell around the pure core (filesystem access).

Invariants:
    - Services raise DomainRouterError subclasses, never raw OSError
"""
