"""Pizza ORM — persists a single catalog item.

Invariants:
    - id is an autoincrement integer primary key, None until the row is flushed; id=0 means unset
    - name, size, and price are non-nullable
    - is_gluten_free is False when omitted or None, both in memory and in the table
    - No relationships to other entities

Design Decisions:
    - size stored by enum value ("Small"/"Medium"/"Large") as a VARCHAR, not a native DB enum
    - price as Numeric(10, 2): round-trips as decimal.Decimal
"""

from decimal import Decimal

from sqlalchemy import Boolean, Enum, Integer, Numeric, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from pizza_catalog.core.domain_types import PizzaSize
from pizza_catalog.db.base import Base


class Pizza(Base):
    """Catalog item."""
    __tablename__ = "pizzas"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    size: Mapped[PizzaSize] = mapped_column(
        Enum(
            PizzaSize,
            name="pizza_size",
            native_enum=False,
            length=10,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    is_gluten_free: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )

    def __init__(self, **kwargs):
        if kwargs.get("id") == 0:
            del kwargs["id"]
        if kwargs.get("is_gluten_free") is None:
            kwargs["is_gluten_free"] = False
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"Pizza(id={self.id!r}, name={self.name!r}, size={self.size!r})"
