"""
Services module containing the domain services and their wiring.
"""

from .base_service import DomainService
from .class_service import ClassService
from .parent_service import ParentService
from .registry import ServiceRegistry
from .student_service import StudentService
from .teacher_service import TeacherService

__all__ = [
    "DomainService",
    "ClassService",
    "StudentService",
    "TeacherService",
    "ParentService",
    "ServiceRegistry",
]
