import pytest

from fuid.config import settings
from tests.models import Base, SessionLocal, engine


@pytest.fixture(scope="session")
def setup_database():
    """Create the test tables once per session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(setup_database):
    """Each test uses an independent transaction that gets rolled back after."""
    connection = engine.connect()
    transaction = connection.begin()
    session = SessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def random_source(monkeypatch):
    """Switch the entropy backend for the duration of a test."""

    def _set(name: str) -> None:
        monkeypatch.setattr(settings, "RANDOM_SOURCE", name)

    return _set
