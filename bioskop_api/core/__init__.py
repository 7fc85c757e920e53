"""Core Layer — domain types, validation rules, errors and outcomes.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validation and parsing functions are pure and deterministic

Design Decisions:
    - Functional core separated from the IO shell: rules testable without a database
"""
