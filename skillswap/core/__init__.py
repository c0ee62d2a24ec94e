"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - Functions are pure; the only non-determinism (match jitter) is injected

Design Decisions:
    - Functional core separated from imperative shell: services/ orchestrates
      store IO around the checks defined here
"""
