from sqlmodel import SQLModel, create_engine, Session

from .core.config import settings


def _engine_kwargs(db_url: str) -> dict:
    # One session per request thread; SQLite must allow it to cross threads
    if db_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(settings.DATABASE_URL, echo=settings.DEBUG, **_engine_kwargs(settings.DATABASE_URL))

def create_db_and_tables(bind=None):
    # Import table models so they are registered on the metadata
    from . import db  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)

def get_session():
    with Session(engine) as session:
        yield session
