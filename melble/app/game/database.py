"""Database configuration for stored rounds."""

import pathlib

from sqlmodel import Session, SQLModel, create_engine

import common.settings

DATABASE_URL = common.settings.DATABASE_URL

engine = create_engine(DATABASE_URL, connect_args={'check_same_thread': False})


def create_db_and_tables() -> None:
    """Create database tables if they don't exist."""
    from . import store  # noqa: F401 # pyright: ignore[reportUnusedImport]

    if DATABASE_URL.startswith('sqlite:///'):
        pathlib.Path(DATABASE_URL.removeprefix('sqlite:///')).parent.mkdir(
            parents=True, exist_ok=True
        )
    SQLModel.metadata.create_all(engine)


def get_session():
    """Get a database session."""
    with Session(engine) as session:
        yield session
