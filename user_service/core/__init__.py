"""Core Layer - domain errors, field rules and persistence contracts.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Field checks are pure and deterministic

Design Decisions:
    - Functional core separated from the imperative shell: routes and the
      SQLAlchemy repository sit outside, core only defines what they must honour
"""
