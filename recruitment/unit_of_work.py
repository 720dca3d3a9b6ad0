import logging
from contextlib import contextmanager

from recruitment.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def atomic():
    """
    Run a block of reads, guards and writes as one unit of work.

    Everything added to the session inside the block is committed together
    when the block exits normally. Any exception (a failed guard, a database
    error, anything else) rolls the whole session back and is re-raised, so
    callers never observe partial writes.
    """
    session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        logger.debug("Unit of work rolled back")
        raise
