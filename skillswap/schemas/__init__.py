"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; business rules stay in services
    - Response schemas read core entities via from_attributes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
