"""ORM Models — SQLAlchemy declarative models for the bundled resources.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so metadata is complete before create_all / alembic
"""

from crudkit.models.user import User  # noqa: F401
from crudkit.models.order import Order  # noqa: F401
