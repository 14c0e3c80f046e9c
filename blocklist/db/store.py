import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

import blocklist.repositories.blocked_domain as domain_repo
from blocklist.db.base import Base, create_db_engine
from blocklist.errors import FatalStorageError, StorageUnavailableError

logger = logging.getLogger(__name__)


class DomainStore:
    """Owns the engine and session factory for the blocked domains table.

    One instance is built per process (or per test) and handed to whoever
    needs it; nothing else keeps a database handle.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = create_db_engine(database_url)
        self.session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

    def ensure_schema(self) -> None:
        """Create the table if it doesn't exist yet. Errors propagate to the caller."""
        url = self.engine.url
        if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        Base.metadata.create_all(bind=self.engine)
        logger.info("Schema ready on %s", url.render_as_string(hide_password=True))

    @contextmanager
    def begin(self) -> Iterator[Session]:
        """
        Open one transaction and yield its session.

        The connection is acquired up front, so a store that can't be reached
        fails here with StorageUnavailableError before any statement runs.
        Commits when the block exits normally and rolls back on any exception.
        """
        session = self.session_factory()
        try:
            try:
                session.begin()
                session.connection()
            except SQLAlchemyError as e:
                raise StorageUnavailableError("Could not open a transaction") from e

            try:
                yield session
            except BaseException:
                session.rollback()
                raise
            session.commit()
        finally:
            session.close()

    def exists(self, name: str) -> bool:
        """Single read outside of any batch transaction."""
        try:
            with self.session_factory() as session:
                return domain_repo.domain_exists(session, name)
        except SQLAlchemyError as e:
            raise FatalStorageError("Existence check failed") from e

    def count(self) -> int:
        try:
            with self.session_factory() as session:
                return domain_repo.count_domains(session)
        except SQLAlchemyError as e:
            raise FatalStorageError("Row count failed") from e

    def dispose(self) -> None:
        self.engine.dispose()
