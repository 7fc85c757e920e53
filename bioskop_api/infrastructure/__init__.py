"""Infrastructure Layer — store access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every store call maps driver errors to StoreFailureError

Design Decisions:
    - Session manager, gateway and logging setup kept apart: one concern per file
"""
