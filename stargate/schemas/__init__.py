"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - JSON keys are camelCase; Python attributes are snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
