"""Database Layer — SQLAlchemy declarative Base and record behaviour.

Invariants:
    - All sessions are async (AsyncSession)
    - Models get naming, validation and query helpers from Base

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local runs and tests
"""
