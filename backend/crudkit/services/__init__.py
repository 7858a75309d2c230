"""Services Layer — lookup, persistence, presentation and execution around the pure core.

Invariants:
    - Every service is request-scoped: built per request from RequestContext + DB session
    - Registries are explicit dicts (no auto-discovery)

Design Decisions:
    - One file per component for locality
"""
