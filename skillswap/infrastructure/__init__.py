"""Infrastructure Layer — database sessions, store backends and logging.

Invariants:
    - Infrastructure implements core/ protocols; core/ never imports from here
    - All SQLAlchemy failures surface as DatabaseError
"""
