"""Services Layer - business rules between the API and persistence.

Invariants:
    - Services receive repositories through their constructor
    - Services raise UserServiceError subclasses, never HTTP exceptions
"""
