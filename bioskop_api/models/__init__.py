"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Imported here so Base.metadata is complete before create_all in tests
"""

from bioskop_api.models.cinema import Cinema  # noqa: F401
