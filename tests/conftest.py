import os
import tempfile
from pathlib import Path

# Set environment variables BEFORE any imports that might use settings
_test_db_dir = tempfile.mkdtemp()
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_test_db_dir, 'test_blocklist.db')}"
os.environ["LOG_LEVEL"] = "DEBUG"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient

from blocklist.db.store import DomainStore
from blocklist.main import create_app

ALEMBIC_INI = Path(__file__).resolve().parents[1] / "alembic.ini"


@pytest.fixture(scope="function")
def store(tmp_path: Path):
    """Create a fresh database for each test and run migrations."""
    test_db_url = f"sqlite:///{tmp_path / 'test.db'}"

    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    domain_store = DomainStore(test_db_url)
    try:
        yield domain_store
    finally:
        # Dispose the engine to close all connections
        domain_store.dispose()


@pytest.fixture(scope="function")
def client(store: DomainStore):
    """Create a test client for an app bound to the per-test store."""
    return TestClient(create_app(store))


@pytest.fixture(scope="function")
def broken_store(tmp_path: Path):
    """A store whose database file can't be opened (its directory doesn't exist)."""
    domain_store = DomainStore(f"sqlite:///{tmp_path / 'missing' / 'db.db'}")
    try:
        yield domain_store
    finally:
        domain_store.dispose()


@pytest.fixture(scope="function")
def broken_client(broken_store: DomainStore):
    return TestClient(create_app(broken_store))


@pytest.fixture(scope="function")
def seed(store: DomainStore):
    """Insert domain names directly, outside of the HTTP layer."""
    import blocklist.repositories.blocked_domain as domain_repo

    def _seed(*names: str) -> None:
        with store.begin() as db:
            for name in names:
                domain_repo.insert_domain(db, name)

    return _seed
