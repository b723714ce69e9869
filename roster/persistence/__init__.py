"""
Persistence module: JSON snapshot repositories, one file per record kind.
"""

from .repositories import (
    ClassRepository,
    JsonFileRepository,
    ParentRepository,
    StudentRepository,
    TeacherRepository,
)

__all__ = [
    "JsonFileRepository",
    "ClassRepository",
    "StudentRepository",
    "TeacherRepository",
    "ParentRepository",
]
