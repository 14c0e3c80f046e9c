from sqlalchemy import exists, insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blocklist.db.models.blocked_domain import BlockedDomain as BlockedDomainModel

# PostgreSQL SQLSTATE for unique_violation.
_PG_UNIQUE_VIOLATION = "23505"


def domain_exists(db: Session, name: str) -> bool:
    """Check whether a domain name is in the table."""
    return bool(
        db.query(exists().where(BlockedDomainModel.domain_name == name)).scalar()
    )


def insert_domain(db: Session, name: str) -> None:
    """
    Insert a domain name inside a savepoint of the current transaction.

    Raises IntegrityError on a unique violation; the savepoint is rolled back
    and the enclosing transaction stays usable. Pure data access - no commit.
    """
    with db.begin_nested():
        db.execute(insert(BlockedDomainModel).values(domain_name=name))


def delete_domain(db: Session, name: str) -> int:
    """Delete a domain name in the current transaction and return the number of rows removed."""
    return (
        db.query(BlockedDomainModel)
        .filter(BlockedDomainModel.domain_name == name)
        .delete(synchronize_session=False)
    )


def count_domains(db: Session) -> int:
    return db.query(BlockedDomainModel).count()


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell a unique-key conflict apart from other integrity errors (NOT NULL, CHECK...)."""
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == _PG_UNIQUE_VIOLATION:
        return True
    # sqlite3 exposes extended result codes from Python 3.11 on.
    error_name = getattr(orig, "sqlite_errorname", None)
    if error_name is not None:
        return error_name == "SQLITE_CONSTRAINT_UNIQUE"
    return "UNIQUE constraint failed" in str(orig)
