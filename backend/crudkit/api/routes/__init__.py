"""Route Modules — one file per concern.

Invariants:
    - Each module defines its own APIRouter with tags; the API prefix is applied in main.py
    - Routes never contain business logic (delegate to action templates / executor)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
