"""Database Package: SQLAlchemy declarative base shared by all ORM models.

Invariants:
    - Only the declarative Base lives here; engines and sessions live in infrastructure/database.py
"""
