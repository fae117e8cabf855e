"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and types at the system boundary
    - Range rules (rating 1-5, non-blank title) belong to the store, not here

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
