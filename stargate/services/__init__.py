"""Services Layer: request pre-processors and handlers (imperative shell).

Invariants:
    - Every request passes through RequestDispatch: pre-processor first, then handler
    - Handlers own the transaction: one commit per mutating request
    - Pure decisions delegated to core/; services only read, apply, and persist

Design Decisions:
    - Split by request family (person commands, duty commands, queries):
      max ~3 methods per handler class
"""
