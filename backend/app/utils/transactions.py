from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session


@contextmanager
def row_transaction(session: Session) -> Iterator[Session]:
    """
    Context manager that makes the work done inside it durable on its own.
    Commits when the block exits cleanly; on any exception the session is
    rolled back (discarding only the uncommitted work) and the error re-raised.
    Usage:
        with row_transaction(db):
            ... DB work ...
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
