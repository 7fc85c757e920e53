"""Pydantic Schemas — request decoding and response shapes for API endpoints.

Invariants:
    - Schemas decode at the system boundary; field rules live in core/

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
