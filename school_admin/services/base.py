"""Service base: session, clock, commit boundary and 404 lookups."""

from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, Optional, TypeVar

from sqlalchemy.orm import Session

from school_admin.core.clock import Clock
from school_admin.core.exceptions import ResourceNotFoundError
from school_admin.core.logging import get_logger
from school_admin.repositories.base import BaseRepository

ModelT = TypeVar("ModelT")
RepositoryT = TypeVar("RepositoryT", bound=BaseRepository)


class BaseService(Generic[ModelT, RepositoryT]):
    """
    Repositories only flush; a service method decides when a unit of work is
    complete and commits it through `transaction()`.
    """

    resource_name: str = "Record"
    not_found_message: Optional[str] = None

    def __init__(self, repository: RepositoryT, db_session: Session, clock: Optional[Clock] = None):
        self.repository: RepositoryT = repository
        self.db: Session = db_session
        # Tests pass a FixedClock; production reads the configured timezone
        self.clock: Clock = clock or Clock()
        self._logger = get_logger(f"school_admin.services.{type(self).__name__}")

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        try:
            yield self.db
            self.db.commit()
        except Exception as exc:
            self.db.rollback()
            self._logger.debug(
                "Rolled back unit of work",
                extra={"resource": self.resource_name, "error_type": type(exc).__name__},
            )
            raise

    def get_or_404(self, entity_id: str) -> ModelT:
        entity = self.repository.get(entity_id)
        if entity is None:
            raise ResourceNotFoundError(self.resource_name, entity_id, message=self.not_found_message)
        return entity

    def _log_mutation(self, action: str, entity_id: str, **context: Any) -> None:
        extra: Dict[str, Any] = {"resource": self.resource_name, "entity_id": entity_id, **context}
        self._logger.info(f"{self.resource_name} {action}", extra=extra)
