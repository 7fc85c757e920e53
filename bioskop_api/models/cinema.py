"""Cinema ORM — maps the existing `bioskop` table.

Invariants:
    - id is a 64-bit primary key assigned by the store: every id the path
      parser accepts binds without overflow
    - nama/lokasi are the column names; name/location are the attribute names
    - rating is a float column; the [0, 5] bound is enforced before writes

Design Decisions:
    - Column names kept as deployed: the table is provisioned outside this service
    - INTEGER on SQLite: only INTEGER PRIMARY KEY autoincrements there
"""

from sqlalchemy import BigInteger, Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bioskop_api.db.base import Base


class Cinema(Base):
    """One cinema row."""
    __tablename__ = "bioskop"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column("nama", Text, nullable=False)
    location: Mapped[str] = mapped_column("lokasi", Text, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
