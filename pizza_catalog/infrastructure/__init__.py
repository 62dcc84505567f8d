"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from services/
    - All SQLAlchemy exceptions leaving a managed session are mapped to PersistenceError
"""
