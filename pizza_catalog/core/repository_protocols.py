"""Boundary Protocols — contract between the catalog service and its persistence context.

Invariants:
    - Services depend on PizzaContext, never on a concrete engine or sessionmaker
    - sqlalchemy.orm.Session satisfies PizzaContext structurally

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from typing import Any, Protocol


class PizzaContext(Protocol):
    """Structural contract for the unit-of-work the service writes through."""
    def add(self, instance: Any) -> None: ...
    def delete(self, instance: Any) -> None: ...
    def get(self, entity: Any, ident: Any) -> Any: ...
    def execute(self, statement: Any) -> Any: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
