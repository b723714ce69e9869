"""
Builds the repositories and services for one data directory.

Each repository is created exactly once here and shared, which keeps every
backing file under a single writer within the process. All services share
one lock, so a check and the write it guards never interleave with another
mutation.
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..core.exceptions import ConfigurationError
from ..persistence.repositories import ClassRepository, ParentRepository, StudentRepository, TeacherRepository
from .class_service import ClassService
from .parent_service import ParentService
from .student_service import StudentService
from .teacher_service import TeacherService

logger = logging.getLogger(__name__)


@dataclass
class ServiceRegistry:
    """The four domain services, wired to each other."""
    classes: ClassService
    students: StudentService
    teachers: TeacherService
    parents: ParentService

    @classmethod
    def from_directory(cls, data_dir: Union[str, Path]) -> "ServiceRegistry":
        data_dir = Path(data_dir)
        if data_dir.exists() and not data_dir.is_dir():
            raise ConfigurationError(f"Data directory {data_dir} is not a directory")

        lock = threading.RLock()
        teachers = TeacherService(TeacherRepository.in_directory(data_dir), lock=lock)
        parents = ParentService(ParentRepository.in_directory(data_dir), lock=lock)
        students = StudentService(StudentRepository.in_directory(data_dir), parents, lock=lock)
        classes = ClassService(ClassRepository.in_directory(data_dir), teachers, students, lock=lock)

        students.attach_class_service(classes)
        teachers.attach_class_service(classes)
        parents.attach_student_service(students)

        logger.info("Services ready over %s", data_dir.resolve())
        return cls(classes=classes, students=students, teachers=teachers, parents=parents)
