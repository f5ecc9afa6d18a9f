from contextlib import contextmanager


@contextmanager
def unit_of_work(session):
    """Commit everything done in the block, or roll all of it back."""
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
