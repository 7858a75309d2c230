"""crudkit — generic CRUD action layer with operations and presenters.

Invariants:
    - Package root contains no executable code beyond the version (import side-effects prohibited)

Design Decisions:
    - Explicit imports only, no star exports
"""

__version__ = "0.1.0"
