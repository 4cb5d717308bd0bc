"""Infrastructure — database sessions, SQL repositories, logging setup.

Invariants:
    - Only this package (and routes via get_db) talks to SQLAlchemy sessions
"""
