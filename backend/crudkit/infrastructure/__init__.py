"""Infrastructure Layer — database sessions, job transport and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Database failures are mapped to crudkit errors before leaving this layer

Design Decisions:
    - Thin wrappers over SQLAlchemy and FastAPI primitives
"""
