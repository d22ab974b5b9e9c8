from typing import Generator

from fastapi import Request


def get_db(request: Request) -> Generator:
    """
    Database session dependency.
    The session factory belongs to the running app (see create_app), the
    session is closed once the request is done.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
