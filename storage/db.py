# timesheets/storage/db.py
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from core.settings import DB_URL

# Ensure SQLModel metadata is populated
import models.records  # noqa: F401


def make_engine(url: str = DB_URL):
    if url.startswith("sqlite"):
        # One shared connection keeps an in-memory database alive across sessions.
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=False)


def session_factory_for(engine):
    def factory() -> Session:
        return Session(engine)

    return factory


_engine = make_engine()

get_session = session_factory_for(_engine)


def init_db(engine=None):
    SQLModel.metadata.create_all(engine or _engine)
