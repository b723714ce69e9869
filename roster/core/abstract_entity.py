"""
Base class for all Roster records.
"""

import copy
import json
import uuid
from abc import ABC
from typing import Any, ClassVar, Dict, Mapping, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .schemas import EntitySchema

E = TypeVar("E", bound="AbstractEntity")


class AbstractEntity(ABC):
    """
    Base entity with:
    - unique, immutable ID (UUID4 text)
    - a pydantic-validated field set
    - plain-object and JSON serialization
    """

    kind: ClassVar[str]
    schema: ClassVar[Type[EntitySchema]]

    def __init__(self, entity_id: Optional[str] = None, **fields: Any):
        if entity_id is not None:
            fields["id"] = entity_id
        data = self._validate(fields)
        self._id = data.id or str(uuid.uuid4())
        self._data = data

    @classmethod
    def _validate(cls, fields: Mapping[str, Any]) -> EntitySchema:
        try:
            return cls.schema.model_validate(dict(fields))
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e) from e

    @classmethod
    def _plain_key(cls, key: str) -> str:
        """Map an attribute name to its plain-object (alias) spelling."""
        field = cls.schema.model_fields.get(key)
        if field is not None and field.alias:
            return field.alias
        return key

    @classmethod
    def from_dict(cls: Type[E], data: Mapping[str, Any]) -> E:
        """Rebuild an entity from its plain-object form, keeping its id."""
        return cls(**data)

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    def _get(self, name: str) -> Any:
        return getattr(self._data, name)

    def _merged(self, changes: Mapping[str, Any]) -> EntitySchema:
        changes = {self._plain_key(key): value for key, value in changes.items()}
        if "id" in changes:
            if changes.pop("id") != self._id:
                raise ValidationError([{"path": "id", "reason": "identifier is immutable"}])
        merged = self._data.model_dump(by_alias=True, exclude={"id"})
        merged.update(changes)
        merged["id"] = self._id
        return self._validate(merged)

    def update(self, changes: Mapping[str, Any]) -> None:
        """
        Reassign the given fields.

        The merged field set is validated as a whole before anything changes,
        so a rejected update leaves the entity untouched.
        """
        self._data = self._merged(changes)

    def with_changes(self: E, changes: Mapping[str, Any]) -> E:
        """Copy of this entity with ``changes`` applied; this one is left as is."""
        changed = copy.copy(self)
        changed._data = self._merged(changes)
        return changed

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to its plain-object form (JSON-compatible values)."""
        data = {"id": self._id}
        data.update(self._data.model_dump(mode="json", by_alias=True, exclude={"id"}))
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbstractEntity) or type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __str__(self) -> str:
        return f"{self.kind}(id={self._id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()!r})"
