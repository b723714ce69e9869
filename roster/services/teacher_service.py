"""
Teacher service.
"""

from typing import List

from ..core.entities import SchoolClass, Teacher
from ..core.interfaces import Repository, SupportsListBy
from .base_service import DomainService


class TeacherService(DomainService[Teacher]):
    """Service for managing teachers; removal is locked while classes reference them."""

    entity_class = Teacher
    unique_field = "document"

    def __init__(self, repository: Repository[Teacher], lock=None):
        super().__init__(repository, lock)
        self._class_service = None

    def attach_class_service(self, class_service: SupportsListBy[SchoolClass]) -> None:
        self._class_service = class_service
        self.register_dependent(SchoolClass.kind, lambda teacher_id: class_service.list_by("teacher", teacher_id))

    def get_classes(self, teacher_id: str) -> List[SchoolClass]:
        teacher = self.find_by_id(teacher_id)
        if self._class_service is None:
            return []
        return self._class_service.list_by("teacher", teacher.id)
