import logging

from sqlmodel import Session

from patient_booking.core import config
from patient_booking.core.logging import setup_logging
from patient_booking.database import get_session


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = config.Settings()
    assert s.DATABASE_URL == "sqlite:///./other.db"
    assert s.LOG_LEVEL == "DEBUG"
    assert s.APP_NAME == "Patient Booking API"


def test_setup_logging_uses_configured_level(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setattr(config.settings, "LOG_LEVEL", "warning")
    try:
        setup_logging()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_get_session_yields_session():
    gen = get_session()
    session = next(gen)
    assert isinstance(session, Session)
    gen.close()


def test_engine_kwargs_by_database_scheme():
    from patient_booking.database import _engine_kwargs

    assert _engine_kwargs("sqlite:///./x.db") == {"connect_args": {"check_same_thread": False}}
    assert _engine_kwargs("postgresql://u:p@db/booking") == {"pool_pre_ping": True}
