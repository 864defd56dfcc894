from contextlib import contextmanager
from wiki.extensions import db

@contextmanager
def transactional():
    """Context manager for database transactions."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
