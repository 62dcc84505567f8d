"""Pizza Service — get_pizzas, add_pizza, delete_pizza.

Invariants:
    - The persistence context is injected per instance; nothing is read from globals
    - add_pizza and delete_pizza each end in exactly one commit
    - A failed read or write rolls the context back before PersistenceError propagates
    - PersistenceError is raised and chained to the store error even when the rollback fails
    - An id of 0 means unset; add_pizza lets the store assign the key
    - delete_pizza on an unknown id is a silent no-op

Design Decisions:
    - get_pizzas orders by id so results follow insertion order
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from pizza_catalog.core.domain_types import PizzaId
from pizza_catalog.core.errors import ErrorContext, PersistenceError
from pizza_catalog.core.repository_protocols import PizzaContext
from pizza_catalog.models.pizza import Pizza

logger = logging.getLogger(__name__)


class PizzaService:
    """Catalog reads and writes against a persistence context."""

    def __init__(self, db: PizzaContext):
        self.db = db

    def get_pizzas(self) -> list[Pizza]:
        """Return every stored pizza in insertion order."""
        try:
            result = self.db.execute(select(Pizza).order_by(Pizza.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._fail(e, "query") from e

    def add_pizza(self, pizza: Pizza) -> None:
        """Store a new pizza; its id is populated once the commit succeeds."""
        if pizza.id == 0:
            pizza.id = None
        self.db.add(pizza)
        try:
            self.db.commit()
        except IntegrityError as e:
            raise self._fail(e, "commit", detail="Integrity constraint violated") from e
        except SQLAlchemyError as e:
            raise self._fail(e, "commit") from e
        logger.info(
            f"Added pizza {pizza.name!r}",
            extra={"pizza_id": pizza.id, "operation": "add"},
        )

    def delete_pizza(self, pizza_id: PizzaId) -> None:
        """Remove the pizza with the given id, if there is one."""
        try:
            pizza = self.db.get(Pizza, pizza_id)
        except SQLAlchemyError as e:
            raise self._fail(e, "query", pizza_id=pizza_id) from e
        if pizza is None:
            logger.debug(
                f"No pizza with id {pizza_id}; nothing to delete",
                extra={"pizza_id": pizza_id, "operation": "delete"},
            )
            return
        try:
            self.db.delete(pizza)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail(e, "commit", pizza_id=pizza_id) from e
        logger.info(
            f"Deleted pizza {pizza_id}",
            extra={"pizza_id": pizza_id, "operation": "delete"},
        )

    def _fail(
        self,
        exc: SQLAlchemyError,
        operation: str,
        detail: str = "Database operation failed",
        pizza_id: int | None = None,
    ) -> PersistenceError:
        try:
            self.db.rollback()
        except SQLAlchemyError as rollback_error:
            logger.error(
                f"Rollback after failed {operation} also failed: {rollback_error}",
                extra={"error_code": "PERSISTENCE_ERROR", "operation": "rollback"},
            )
        logger.error(
            f"{detail}: {exc}",
            extra={"error_code": "PERSISTENCE_ERROR", "operation": operation},
        )
        return PersistenceError(
            detail, operation, ErrorContext(pizza_id=pizza_id, operation=operation),
        )
