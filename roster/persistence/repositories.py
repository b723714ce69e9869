"""
Repository pattern implementations for data access.

Each repository owns one JSON file holding ``[[id, entity], ...]`` in
insertion order and rewrites the whole file on every mutation.

Only one repository instance may write a given file. Two instances over the
same path each keep their own snapshot, and the later rewrite silently drops
the other's changes. Build one instance per kind and share it (see
``roster.services.registry``).
"""

import json
import logging
import os
import tempfile
import threading
from collections import OrderedDict
from operator import attrgetter
from pathlib import Path
from typing import Any, Callable, ClassVar, Dict, Generic, List, Optional, Type, TypeVar, Union

from ..core.abstract_entity import AbstractEntity
from ..core.entities import Parent, SchoolClass, Student, Teacher
from ..core.enums import EntityKind
from ..core.exceptions import StorageCorruptionError, ValidationError
from ..core.interfaces import Repository

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=AbstractEntity)


class JsonFileRepository(Repository[T], Generic[T]):
    """Base repository: an ordered in-memory index written through to one file."""

    entity_class: ClassVar[Type[AbstractEntity]]
    entity_kind: ClassVar[EntityKind]
    # plain field name -> accessor; list_by only answers for these
    queryable_fields: ClassVar[Dict[str, Callable[[Any], Any]]] = {}

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._lock = threading.RLock()
        self._entities: "OrderedDict[str, T]" = OrderedDict()
        self._load()

    @classmethod
    def in_directory(cls, directory: Union[str, Path]):
        """Build the repository over ``<directory>/<kind>.json``."""
        return cls(Path(directory) / cls.entity_kind.file_name)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        with self._lock:
            if not self._path.exists():
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._write()
                logger.info("Created empty %s store at %s", self.entity_class.kind, self._path)
                return

            try:
                raw = json.loads(self._path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                raise StorageCorruptionError(self._path, f"unreadable JSON ({e})") from e

            if not isinstance(raw, list):
                raise StorageCorruptionError(self._path, "top-level value is not an array")

            for position, pair in enumerate(raw):
                if not (isinstance(pair, list) and len(pair) == 2 and isinstance(pair[0], str)
                        and isinstance(pair[1], dict)):
                    raise StorageCorruptionError(self._path, f"entry {position} is not an [id, object] pair")
                entity_id, data = pair
                try:
                    entity = self._entity_from_dict(data)
                except ValidationError as e:
                    raise StorageCorruptionError(self._path, f"entry {position}: {e.message}") from e
                if entity.id != entity_id:
                    raise StorageCorruptionError(self._path, f"entry {position} key does not match its id")
                if entity_id in self._entities:
                    raise StorageCorruptionError(self._path, f"duplicate id {entity_id}")
                self._entities[entity_id] = entity

            logger.info("Loaded %d %s records from %s", len(self._entities), self.entity_class.kind, self._path)

    def _write(self, entities: Optional["OrderedDict[str, T]"] = None) -> None:
        """Rewrite the backing file from ``entities`` (the in-memory mapping by default)."""
        if entities is None:
            entities = self._entities
        payload = json.dumps([[entity_id, entity.to_dict()] for entity_id, entity in entities.items()])
        fd, tmp_path = tempfile.mkstemp(dir=str(self._path.parent), prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self._path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.debug("Wrote %d %s records to %s", len(entities), self.entity_class.kind, self._path)

    def _entity_from_dict(self, data: Dict[str, Any]) -> T:
        """Convert dictionary to entity instance."""
        return self.entity_class.from_dict(data)

    def save(self, entity: T) -> "JsonFileRepository[T]":
        """Insert or overwrite an entity, keeping the original position of known ids."""
        with self._lock:
            # the mapping changes only once the file holds the new state
            entities = self._entities.copy()
            entities[entity.id] = entity
            self._write(entities)
            self._entities = entities
            return self

    def find_by_id(self, entity_id: str) -> Optional[T]:
        with self._lock:
            return self._entities.get(entity_id)

    def list(self) -> List[T]:
        with self._lock:
            return list(self._entities.values())

    def list_by(self, prop: str, value: Any) -> List[T]:
        accessor = self.queryable_fields.get(prop)
        if accessor is None:
            return []
        with self._lock:
            return [entity for entity in self._entities.values() if accessor(entity) == value]

    def remove(self, entity_id: str) -> None:
        with self._lock:
            if entity_id not in self._entities:
                return
            entities = self._entities.copy()
            del entities[entity_id]
            self._write(entities)
            self._entities = entities

    def count(self) -> int:
        with self._lock:
            return len(self._entities)


class ClassRepository(JsonFileRepository[SchoolClass]):
    """Repository for Class entities."""

    entity_class = SchoolClass
    entity_kind = EntityKind.CLASS
    queryable_fields = {
        "id": attrgetter("id"),
        "code": attrgetter("code"),
        "teacher": attrgetter("teacher"),
    }


class StudentRepository(JsonFileRepository[Student]):
    """Repository for Student entities."""

    entity_class = Student
    entity_kind = EntityKind.STUDENT
    queryable_fields = {
        "id": attrgetter("id"),
        "firstName": attrgetter("first_name"),
        "surname": attrgetter("surname"),
        "document": attrgetter("document"),
        "bloodType": attrgetter("blood_type"),
        "class": attrgetter("class_"),
        "parents": attrgetter("parents"),
    }


class TeacherRepository(JsonFileRepository[Teacher]):
    """Repository for Teacher entities."""

    entity_class = Teacher
    entity_kind = EntityKind.TEACHER
    queryable_fields = {
        "id": attrgetter("id"),
        "firstName": attrgetter("first_name"),
        "surname": attrgetter("surname"),
        "document": attrgetter("document"),
        "email": attrgetter("email"),
        "major": attrgetter("major"),
    }


class ParentRepository(JsonFileRepository[Parent]):
    """Repository for Parent entities."""

    entity_class = Parent
    entity_kind = EntityKind.PARENT
    queryable_fields = {
        "id": attrgetter("id"),
        "firstName": attrgetter("first_name"),
        "surname": attrgetter("surname"),
        "document": attrgetter("document"),
    }
