"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Duty lifecycle decisions computed here, applied to ORM rows by services/
      (functional core, imperative shell)
"""
