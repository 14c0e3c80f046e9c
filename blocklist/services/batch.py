import logging
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

import blocklist.repositories.blocked_domain as domain_repo
from blocklist.db.store import DomainStore
from blocklist.domain.batch import BatchOperation, BatchResult, ItemOutcome, OutcomeKind
from blocklist.errors import DomainValidationError, FatalStorageError

logger = logging.getLogger(__name__)


def _insert_one(db: Session, index: int, name: str) -> ItemOutcome:
    try:
        domain_repo.insert_domain(db, name)
    except IntegrityError as e:
        if not domain_repo.is_unique_violation(e):
            raise
        logger.debug("Domain %r (index %d) already stored", name, index)
        return ItemOutcome(index=index, name=name, kind=OutcomeKind.CONFLICT)
    return ItemOutcome(index=index, name=name, kind=OutcomeKind.APPLIED)


def _delete_one(db: Session, index: int, name: str) -> ItemOutcome:
    if domain_repo.delete_domain(db, name) == 0:
        logger.debug("Domain %r (index %d) not stored", name, index)
        return ItemOutcome(index=index, name=name, kind=OutcomeKind.MISSING)
    return ItemOutcome(index=index, name=name, kind=OutcomeKind.APPLIED)


_APPLIERS = {
    BatchOperation.INSERT: _insert_one,
    BatchOperation.DELETE: _delete_one,
}


def apply_batch(
    store: DomainStore, names: Sequence[str], operation: BatchOperation
) -> BatchResult:
    """
    Apply one operation to every name, in order, inside a single transaction.

    - Conflicts (insert) and missing rows (delete) are recorded per item and
      the loop carries on
    - The transaction is committed once the loop finishes, even if every
      item failed
    - Duplicate names are not collapsed; each occurrence is attempted

    Raises:
        DomainValidationError: If no names were given (no transaction is opened)
        StorageUnavailableError: If the transaction can't be opened
        FatalStorageError: On any other storage failure; nothing is committed
    """
    if not names:
        raise DomainValidationError("No domains provided.")

    apply_one = _APPLIERS[operation]
    outcomes: list[ItemOutcome] = []

    try:
        with store.begin() as db:
            for index, name in enumerate(names):
                outcomes.append(apply_one(db, index, name))
    except SQLAlchemyError as e:
        logger.exception(
            "%s batch aborted after %d of %d items; rolled back",
            operation.value,
            len(outcomes),
            len(names),
        )
        raise FatalStorageError(f"{operation.value} batch failed") from e

    result = BatchResult(operation=operation, outcomes=tuple(outcomes))
    logger.info(
        "%s batch committed: %d applied, %d failed",
        operation.value,
        len(result.applied),
        len(result.failed),
    )
    return result
