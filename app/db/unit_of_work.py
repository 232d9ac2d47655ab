"""Explicit transaction scope used by the services."""
from contextlib import contextmanager
from typing import Iterator

from sqlmodel import Session


@contextmanager
def unit_of_work(session: Session, read_only: bool = False) -> Iterator[Session]:
    """
    Run a block of store operations as one atomic unit.

    Commits when the block exits normally, rolls back when it raises.
    A read-only unit always rolls back so nothing it touched is persisted.

    Args:
        session: Request-scoped session; closing it is the caller's job
        read_only: Discard any pending changes instead of committing

    Yields:
        The same session, inside an open transaction
    """
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    if read_only:
        session.rollback()
    else:
        session.commit()
