"""Pydantic Schemas — presenter views of each resource.

Invariants:
    - One BaseModel per (resource, view); from_attributes reads ORM rows directly
    - Schemas only describe output shape; validation rules live on the models

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
