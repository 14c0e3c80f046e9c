from blocklist.db.store import DomainStore
from blocklist.errors import DomainValidationError


def check_exists(store: DomainStore, name: str | None) -> bool:
    """
    Tell whether a domain name is blocked.

    Raises:
        DomainValidationError: If no name was given (the store is not queried)
        FatalStorageError: If the read fails
    """
    if not name:
        raise DomainValidationError("Parameter \"domain\" wasn't provided in the query!")
    return store.exists(name)
