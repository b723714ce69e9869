"""
Core module containing the entity model, schemas and exceptions.
"""

from .abstract_entity import AbstractEntity
from .entities import Parent, Person, SchoolClass, Student, Teacher
from .enums import BloodType, EntityKind, Shift
from .exceptions import (
    ConfigurationError,
    ConflictError,
    DependencyConflictError,
    DomainError,
    MissingDependencyError,
    NotFoundError,
    RosterException,
    StorageCorruptionError,
    ValidationError,
)
from .interfaces import Repository, SupportsFindById, SupportsListBy

__all__ = [
    # Entities
    "AbstractEntity",
    "Person",
    "SchoolClass",
    "Student",
    "Teacher",
    "Parent",

    # Interfaces
    "Repository",
    "SupportsFindById",
    "SupportsListBy",

    # Enums
    "BloodType",
    "EntityKind",
    "Shift",

    # Exceptions
    "RosterException",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "MissingDependencyError",
    "DependencyConflictError",
    "StorageCorruptionError",
    "ConfigurationError",
]
