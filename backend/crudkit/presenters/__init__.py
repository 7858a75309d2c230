"""Presenters — serialization strategies registered per resource type.

Invariants:
    - A presenter is registered under "<ModelName>Entity"
    - Registration is explicit (build_presenter_registry), never by name lookup magic

Design Decisions:
    - Views are Pydantic schemas (schemas/): from_attributes + model_dump(mode="json")
      gives JSON-ready output with no hand-written encoders
"""
