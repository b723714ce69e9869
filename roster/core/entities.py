"""
Core entities for the Roster platform: classes, students, teachers and parents.
"""

from datetime import datetime
from typing import List, Optional

from .abstract_entity import AbstractEntity
from .enums import BloodType, Shift
from .schemas import AddressSchema, ClassSchema, ParentSchema, StudentSchema, TeacherSchema


class Person(AbstractEntity):
    """Abstract base class for all persons in the system."""

    @property
    def first_name(self) -> str:
        return self._get("first_name")

    @first_name.setter
    def first_name(self, value: str) -> None:
        self.update({"first_name": value})

    @property
    def surname(self) -> str:
        return self._get("surname")

    @surname.setter
    def surname(self, value: str) -> None:
        self.update({"surname": value})

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.surname}"

    @property
    def document(self) -> str:
        return self._get("document")

    @document.setter
    def document(self, value: str) -> None:
        self.update({"document": value})


class SchoolClass(AbstractEntity):
    """A class (homeroom group) with an optional teacher."""

    kind = "Class"
    schema = ClassSchema

    @property
    def code(self) -> str:
        return self._get("code")

    @code.setter
    def code(self, value: str) -> None:
        self.update({"code": value})

    @property
    def teacher(self) -> Optional[str]:
        """Teacher ID, or None when no teacher is assigned."""
        return self._get("teacher")

    @teacher.setter
    def teacher(self, value: Optional[str]) -> None:
        self.update({"teacher": value})

    @property
    def shift(self) -> Shift:
        return Shift(self.code[-1])


class Student(Person):
    """Student entity enrolled in one class, with one or more parents."""

    kind = "Student"
    schema = StudentSchema

    @property
    def birth_date(self) -> datetime:
        return self._get("birth_date")

    @property
    def blood_type(self) -> BloodType:
        return self._get("blood_type")

    @property
    def class_(self) -> str:
        """Class ID."""
        return self._get("class_")

    @class_.setter
    def class_(self, value: str) -> None:
        self.update({"class": value})

    @property
    def parents(self) -> List[str]:
        """Parent IDs."""
        return list(self._get("parents"))

    @parents.setter
    def parents(self, value: List[str]) -> None:
        self.update({"parents": value})

    @property
    def start_date(self) -> datetime:
        return self._get("start_date")

    @property
    def medications(self) -> Optional[List[str]]:
        value = self._get("medications")
        return None if value is None else list(value)

    @property
    def allergies(self) -> Optional[List[str]]:
        value = self._get("allergies")
        return None if value is None else list(value)


class Teacher(Person):
    """Teacher entity with employment details."""

    kind = "Teacher"
    schema = TeacherSchema

    @property
    def phone(self) -> str:
        return self._get("phone")

    @property
    def email(self) -> str:
        return self._get("email")

    @email.setter
    def email(self, value: str) -> None:
        self.update({"email": value})

    @property
    def hiring_date(self) -> datetime:
        return self._get("hiring_date")

    @property
    def major(self) -> str:
        return self._get("major")

    @property
    def salary(self) -> float:
        return self._get("salary")

    @salary.setter
    def salary(self, value: float) -> None:
        self.update({"salary": value})


class Parent(Person):
    """Parent or guardian of one or more students."""

    kind = "Parent"
    schema = ParentSchema

    @property
    def phones(self) -> List[str]:
        return list(self._get("phones"))

    @property
    def emails(self) -> List[str]:
        return list(self._get("emails"))

    @property
    def address(self) -> List[AddressSchema]:
        return [a.model_copy() for a in self._get("address")]


