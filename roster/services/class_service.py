"""
Class service: code uniqueness, teacher references and the student lock.
"""

from typing import Any, List, Mapping

from ..core.entities import SchoolClass, Student, Teacher
from ..core.exceptions import MissingDependencyError
from ..core.interfaces import Repository, SupportsFindById, SupportsListBy
from .base_service import DomainService


class ClassService(DomainService[SchoolClass]):
    """Service for managing classes."""

    entity_class = SchoolClass
    unique_field = "code"

    def __init__(self, repository: Repository[SchoolClass], teacher_service: SupportsFindById[Teacher],
                 student_service: SupportsListBy[Student], lock=None):
        super().__init__(repository, lock)
        self._teacher_service = teacher_service
        self._student_service = student_service
        self.register_dependent(Student.kind, lambda class_id: student_service.list_by("class", class_id))

    def _check_references(self, data: Mapping[str, Any]) -> None:
        # an explicit null clears the teacher; only a given id must exist
        self._require(self._teacher_service, data.get("teacher"))

    def get_teacher(self, class_id: str) -> Teacher:
        """Get the teacher assigned to a class."""
        school_class = self.find_by_id(class_id)
        if school_class.teacher is None:
            raise MissingDependencyError(Teacher.kind, school_class.id, SchoolClass.kind)
        return self._teacher_service.find_by_id(school_class.teacher)

    def get_students(self, class_id: str) -> List[Student]:
        """Get the students enrolled in a class."""
        school_class = self.find_by_id(class_id)
        return self._student_service.list_by("class", school_class.id)
