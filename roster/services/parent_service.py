"""
Parent service.
"""

from typing import List

from ..core.entities import Parent, Student
from ..core.interfaces import Repository
from .base_service import DomainService


class ParentService(DomainService[Parent]):
    """Service for managing parents; removal is locked while students reference them."""

    entity_class = Parent
    unique_field = "document"

    def __init__(self, repository: Repository[Parent], lock=None):
        super().__init__(repository, lock)
        self._student_service = None

    def attach_student_service(self, student_service) -> None:
        self._student_service = student_service
        self.register_dependent(Student.kind, student_service.list_by_parent)

    def get_students(self, parent_id: str) -> List[Student]:
        parent = self.find_by_id(parent_id)
        if self._student_service is None:
            return []
        return self._student_service.list_by_parent(parent.id)
