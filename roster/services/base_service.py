"""
Base domain service: integrity rules layered over one repository.
"""

import logging
import threading
from typing import Any, Callable, ClassVar, Dict, Generic, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from ..core.abstract_entity import AbstractEntity
from ..core.exceptions import ConflictError, DependencyConflictError, NotFoundError
from ..core.interfaces import Repository, SupportsFindById
from ..core.schemas import canonical_id

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=AbstractEntity)

DependentLookup = Callable[[str], Sequence[AbstractEntity]]


class DomainService(Generic[T]):
    """
    Common create/update/remove flow for one entity kind.

    Subclasses declare ``unique_field`` (plain name checked for conflicts) and
    implement ``_check_references`` for the foreign keys they own. Every check
    runs before the repository is touched, so a failed call writes nothing.

    Mutations hold ``lock`` from the first check to the write. Services that
    check each other's records must share one lock (``ServiceRegistry`` does),
    otherwise a concurrent call can invalidate a check before the write lands.
    """

    entity_class: ClassVar[Type[AbstractEntity]]
    unique_field: ClassVar[Optional[str]] = None

    def __init__(self, repository: Repository[T], lock: Optional[threading.RLock] = None):
        self._repository = repository
        self._lock = lock or threading.RLock()
        self._dependents: List[Tuple[str, DependentLookup]] = []

    @property
    def kind(self) -> str:
        return self.entity_class.kind

    def register_dependent(self, dependent_kind: str, lookup: DependentLookup) -> None:
        """Refuse removal while ``lookup(id)`` returns any record."""
        self._dependents.append((dependent_kind, lookup))

    # Queries

    def find_by_id(self, entity_id: str) -> T:
        entity = self._repository.find_by_id(canonical_id(entity_id))
        if entity is None:
            raise NotFoundError(entity_id, self.kind)
        return entity

    def list(self) -> List[T]:
        return self._repository.list()

    def list_by(self, prop: str, value: Any) -> List[T]:
        return self._repository.list_by(prop, value)

    # Mutations

    def create(self, data: Mapping[str, Any]) -> T:
        data = self._plain(data)
        with self._lock:
            self._check_new_id(data.get("id"))
            self._check_unique(data)
            self._check_references(data)
            entity = self.entity_class(**data)
            self._repository.save(entity)
        logger.info("Created %s %s", self.kind, entity.id)
        return entity

    def update(self, entity_id: str, changes: Mapping[str, Any]) -> T:
        changes = self._plain(changes)
        with self._lock:
            current = self.find_by_id(entity_id)
            self._check_unique(changes, exclude_id=current.id)
            self._check_references(changes)
            # the stored entity is replaced only when the write succeeds
            entity = current.with_changes(changes)
            self._repository.save(entity)
        logger.info("Updated %s %s (%s)", self.kind, entity.id, ", ".join(sorted(changes)) or "no fields")
        return entity

    def remove(self, entity_id: str) -> None:
        with self._lock:
            entity = self.find_by_id(entity_id)
            for dependent_kind, lookup in self._dependents:
                if lookup(entity.id):
                    raise DependencyConflictError(dependent_kind, entity_id, self.kind)
            self._repository.remove(entity.id)
        logger.info("Removed %s %s", self.kind, entity.id)

    # Checks

    def _plain(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {self.entity_class._plain_key(key): value for key, value in data.items()}

    def _check_new_id(self, entity_id: Optional[str]) -> None:
        known = canonical_id(entity_id)
        if known is not None and self._repository.find_by_id(known) is not None:
            raise ConflictError(entity_id, self.kind)

    def _check_unique(self, data: Mapping[str, Any], exclude_id: Optional[str] = None) -> None:
        if self.unique_field is None or self.unique_field not in data:
            return
        locator = data[self.unique_field]
        for existing in self._repository.list_by(self.unique_field, locator):
            if existing.id != exclude_id:
                raise ConflictError(locator, self.kind)

    def _check_references(self, data: Mapping[str, Any]) -> None:
        """Resolve foreign keys present and non-null in ``data``."""
        pass

    @staticmethod
    def _require(service: SupportsFindById, entity_id: Any) -> None:
        entity_id = canonical_id(entity_id)
        # malformed ids are left to entity validation, which reports them
        if entity_id is not None:
            service.find_by_id(entity_id)
