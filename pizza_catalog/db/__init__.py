"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Single engine per process (initialized via init_db)
    - All sessions are synchronous ORM sessions (sqlalchemy.orm.Session)
"""
