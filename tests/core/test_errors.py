"""Error Hierarchy — codes, categories, and the error envelope."""

from pizza_catalog.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity,
    PersistenceError, PizzaCatalogError,
)


def test_persistence_error_is_catalog_error():
    err = PersistenceError("Integrity constraint violated", "commit")
    assert isinstance(err, PizzaCatalogError)
    assert err.code == "PERSISTENCE_ERROR"
    assert err.category is ErrorCategory.DATABASE
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.operation == "commit"


def test_persistence_error_message_names_operation():
    err = PersistenceError("Connection or operational error", "execute")
    assert str(err) == "Database execute failed: Connection or operational error"


def test_persistence_error_fills_context_operation():
    err = PersistenceError("boom", "query")
    assert err.context.operation == "query"


def test_explicit_context_operation_is_kept():
    err = PersistenceError("boom", "commit", ErrorContext(pizza_id=3, operation="delete"))
    assert err.context.operation == "delete"
    assert err.context.pizza_id == 3


def test_to_dict_envelope():
    err = PersistenceError("boom", "commit", ErrorContext(pizza_id=3))
    body = err.to_dict()["error"]
    assert body["code"] == "PERSISTENCE_ERROR"
    assert body["category"] == "database"
    assert body["severity"] == "critical"
    assert body["context"] == {"pizza_id": 3, "operation": "commit"}
    assert body["timestamp"] == err.context.timestamp.isoformat()


def test_base_error_defaults_to_error_severity():
    err = PizzaCatalogError("boom", "CATALOG_ERROR", ErrorCategory.DATABASE)
    assert err.severity is ErrorSeverity.ERROR
    assert err.to_dict()["error"]["severity"] == "error"


def test_severity_scale():
    assert [s.value for s in ErrorSeverity] == ["error", "critical"]
