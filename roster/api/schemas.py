"""
Request models for the REST API.

Creation bodies reuse the entity field sets without ``id``, which the server
assigns. Update bodies make every field optional; only the keys the client
actually sent are applied, so an explicit ``null`` and an omitted key stay
distinguishable (``exclude_unset``).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..core.enums import BloodType
from ..core.schemas import (
    AddressSchema, ClassCode, ClassFields, Email, Identifier, ParentFields, RosterModel, Salary,
    StudentFields, TeacherFields, Text,
)

ClassCreate = ClassFields
StudentCreate = StudentFields
TeacherCreate = TeacherFields
ParentCreate = ParentFields


class ClassUpdate(RosterModel):
    code: Optional[ClassCode] = None
    teacher: Optional[Identifier] = None


class StudentUpdate(RosterModel):
    first_name: Optional[Text] = None
    surname: Optional[Text] = None
    document: Optional[Text] = None
    birth_date: Optional[datetime] = None
    blood_type: Optional[BloodType] = None
    class_: Optional[Identifier] = Field(None, alias="class")
    parents: Optional[List[Identifier]] = None
    start_date: Optional[datetime] = None
    medications: Optional[List[str]] = None
    allergies: Optional[List[str]] = None


class TeacherUpdate(RosterModel):
    first_name: Optional[Text] = None
    surname: Optional[Text] = None
    phone: Optional[Text] = None
    email: Optional[Email] = None
    document: Optional[Text] = None
    hiring_date: Optional[datetime] = None
    major: Optional[Text] = None
    salary: Optional[Salary] = None


class ParentUpdate(RosterModel):
    first_name: Optional[Text] = None
    surname: Optional[Text] = None
    phones: Optional[List[Text]] = None
    emails: Optional[List[Email]] = None
    document: Optional[Text] = None
    address: Optional[List[AddressSchema]] = None


def request_fields(payload: BaseModel, partial: bool = False) -> Dict[str, Any]:
    """Plain-object fields of a request body, keyed by their wire names."""
    return payload.model_dump(by_alias=True, exclude_unset=partial)
