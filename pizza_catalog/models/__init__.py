"""ORM Models — SQLAlchemy declarative models for catalog entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all
"""

from pizza_catalog.models.pizza import Pizza  # noqa: F401
