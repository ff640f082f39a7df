import enum
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError


class StoreFailure(enum.Enum):
    CONFLICT = "conflict"
    CONNECTION = "connection"
    MISSING = "missing"
    UNKNOWN = "unknown"


@dataclass
class StoreResult:
    """Outcome of a repository write.

    Truthy on success, so ``if repository.save(entity):`` keeps working for
    callers that do not care why a write failed.
    """

    value: Any = None
    failure: Optional[StoreFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: Any = True) -> "StoreResult":
        return cls(value=value)

    @classmethod
    def failed(cls, failure: StoreFailure) -> "StoreResult":
        return cls(failure=failure)


def classify(exc: Exception) -> StoreFailure:
    """Map a SQLAlchemy error to the failure kind the services act on."""
    if isinstance(exc, IntegrityError):
        return StoreFailure.CONFLICT
    if isinstance(exc, (OperationalError, InterfaceError)):
        return StoreFailure.CONNECTION
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return StoreFailure.CONNECTION
    return StoreFailure.UNKNOWN
