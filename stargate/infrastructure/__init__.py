"""Infrastructure Layer: database engine, sessions, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures leaving this layer are mapped to core errors
"""
