from errors import InvalidArgumentError, NotFoundError, StorageError
from repositories import StoreFailure


def raise_for_failure(result, conflict_message, missing_message=None, conflict_error=InvalidArgumentError):
    """Raise the domain error matching a failed ``StoreResult``; no-op on success."""
    if result:
        return
    if result.failure is StoreFailure.CONFLICT:
        raise conflict_error(conflict_message)
    if result.failure is StoreFailure.MISSING:
        raise NotFoundError(missing_message or conflict_message)
    raise StorageError(f"Storage failure ({result.failure.value})", result.failure)
