"""
Custom exceptions for the Roster platform.

Domain errors carry the entity kind they concern; the REST layer turns them
into status codes using ``status`` and ``error_code``.
"""

from typing import Any, Dict, List, Optional, Type, Union


KindLike = Union[str, Type[Any]]


def kind_name(kind: KindLike) -> str:
    """Return the display name of an entity kind (class or plain string)."""
    if isinstance(kind, str):
        return kind
    return getattr(kind, "kind", None) or kind.__name__


class RosterException(Exception):
    """Base exception for all Roster-related errors."""

    status = 500
    default_code = "UNKNOWN_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}

    @property
    def name(self) -> str:
        return self.__class__.__name__


class ValidationError(RosterException):
    """Raised when entity fields fail their constraints."""

    status = 422
    default_code = "VALIDATION_ERROR"

    def __init__(self, errors: List[Dict[str, str]], message: Optional[str] = None):
        self.errors = list(errors)
        summary = "; ".join(f"{e['path']}: {e['reason']}" for e in self.errors)
        super().__init__(message or f"Invalid data ({summary})", details={"errors": self.errors})

    @classmethod
    def from_pydantic(cls, exc: Any) -> "ValidationError":
        """Build from a ``pydantic.ValidationError``."""
        errors = [
            {"path": ".".join(str(part) for part in err["loc"]) or "__root__", "reason": err["msg"]}
            for err in exc.errors()
        ]
        return cls(errors)


class DomainError(RosterException):
    """Error about a specific entity kind; named ``<Kind>Error`` on the wire."""

    def __init__(self, message: str, kind: KindLike, **details: Any):
        self.kind = kind_name(kind)
        super().__init__(message, details={"kind": self.kind, **details})

    @property
    def name(self) -> str:
        return f"{self.kind}Error"


class NotFoundError(DomainError):
    """Raised when no entity of a kind exists at a locator."""

    status = 404
    default_code = "NOT_FOUND"

    def __init__(self, locator: Any, kind: KindLike):
        self.locator = locator
        super().__init__(
            f'{kind_name(kind)} with locator "{locator}" could not be found', kind, locator=locator
        )


class ConflictError(DomainError):
    """Raised when a uniqueness constraint is already satisfied by a locator."""

    status = 409
    default_code = "CONFLICT"

    def __init__(self, locator: Any, kind: KindLike):
        self.locator = locator
        super().__init__(f'{kind_name(kind)} with locator "{locator}" already exists', kind, locator=locator)


class MissingDependencyError(DomainError):
    """Raised when an existing owner has its optional relation unset."""

    status = 404
    default_code = "DEPENDENCY_LOCK"

    def __init__(self, dependency_kind: KindLike, owner_locator: Any, owner_kind: KindLike):
        self.dependency_kind = kind_name(dependency_kind)
        self.owner_locator = owner_locator
        super().__init__(
            f'{kind_name(owner_kind)} "{owner_locator}" has no {self.dependency_kind} assigned',
            owner_kind,
            dependency=self.dependency_kind,
            locator=owner_locator,
        )


class DependencyConflictError(DomainError):
    """Raised when removal is blocked by records that still reference the target."""

    status = 403
    default_code = "DEPENDENCY_LOCK"

    def __init__(self, dependent_kind: KindLike, locator: Any, kind: KindLike):
        self.dependent_kind = kind_name(dependent_kind)
        self.locator = locator
        super().__init__(
            f'{kind_name(kind)} "{locator}" cannot be removed while {self.dependent_kind} records reference it',
            kind,
            dependent=self.dependent_kind,
            locator=locator,
        )


class StorageCorruptionError(RosterException):
    """Raised when a backing file cannot be parsed into a store."""

    status = 500
    default_code = "STORAGE_CORRUPTION"

    def __init__(self, path: Any, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Storage file {self.path} is corrupt: {reason}", details={"path": self.path})


class ConfigurationError(RosterException):
    """Raised when configuration is invalid."""
    pass
