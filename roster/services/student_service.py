"""
Student service: class and parent references.
"""

from typing import Any, List, Mapping, Optional

from ..core.entities import Parent, SchoolClass, Student
from ..core.interfaces import Repository, SupportsFindById
from .base_service import DomainService


class StudentService(DomainService[Student]):
    """
    Service for managing students.

    The class service also depends on this one (to list a class's students),
    so it is attached after construction with ``attach_class_service``.
    """

    entity_class = Student
    unique_field = "document"

    def __init__(self, repository: Repository[Student], parent_service: SupportsFindById[Parent],
                 class_service: Optional[SupportsFindById[SchoolClass]] = None, lock=None):
        super().__init__(repository, lock)
        self._parent_service = parent_service
        self._class_service = class_service

    def attach_class_service(self, class_service: SupportsFindById[SchoolClass]) -> None:
        self._class_service = class_service

    def _classes(self) -> SupportsFindById[SchoolClass]:
        if self._class_service is None:
            raise RuntimeError("StudentService has no class service attached")
        return self._class_service

    def _check_references(self, data: Mapping[str, Any]) -> None:
        if data.get("class") is not None:
            self._require(self._classes(), data["class"])
        parents = data.get("parents")
        if isinstance(parents, list):
            for parent_id in parents:
                self._require(self._parent_service, parent_id)

    def list_by_parent(self, parent_id: str) -> List[Student]:
        """Students that list ``parent_id`` among their parents."""
        return [student for student in self.list() if parent_id in student.parents]

    def get_class(self, student_id: str) -> SchoolClass:
        return self._classes().find_by_id(self.find_by_id(student_id).class_)

    def get_parents(self, student_id: str) -> List[Parent]:
        student = self.find_by_id(student_id)
        return [self._parent_service.find_by_id(parent_id) for parent_id in student.parents]
