"""
Field schemas for the Roster entities (Pydantic v2).

Attribute names are snake_case; the plain-object form (files, HTTP bodies)
uses the camelCase aliases. Both spellings are accepted on input.
"""

import uuid
from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import BloodType, Shift


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
CLASS_CODE_PATTERN = r"^[0-9]{1,2}[A-Z]-[" + "".join(s.value for s in Shift) + r"]$"


def _normalize_identifier(value: str) -> str:
    try:
        return str(uuid.UUID(value))
    except (ValueError, AttributeError, TypeError):
        raise ValueError("must be a UUID")


def canonical_id(value):
    """Canonical text of a UUID, or None when ``value`` is not one."""
    try:
        return _normalize_identifier(value)
    except ValueError:
        return None


Identifier = Annotated[str, AfterValidator(_normalize_identifier)]
Text = Annotated[str, Field(min_length=1)]
Email = Annotated[str, Field(pattern=EMAIL_PATTERN)]
ClassCode = Annotated[str, Field(pattern=CLASS_CODE_PATTERN, description="Year, letter and shift, e.g. 1B-M.")]
Salary = Annotated[float, Field(ge=1)]


class RosterModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class EntitySchema(RosterModel):
    """Fields shared by every entity kind."""

    id: Optional[Identifier] = None


class AddressSchema(RosterModel):
    line1: Text
    line2: Optional[str] = None
    city: Text
    country: Text
    zip_code: Text


class ClassFields(RosterModel):
    code: ClassCode
    teacher: Optional[Identifier] = Field(..., description="Teacher id, or null when unassigned.")


class StudentFields(RosterModel):
    first_name: Text
    surname: Text
    document: Text
    birth_date: datetime
    blood_type: BloodType
    class_: Identifier = Field(..., alias="class")
    parents: List[Identifier] = Field(..., min_length=1)
    start_date: datetime
    medications: Optional[List[str]] = None
    allergies: Optional[List[str]] = None


class TeacherFields(RosterModel):
    first_name: Text
    surname: Text
    phone: Text
    email: Email
    document: Text
    hiring_date: datetime
    major: Text
    salary: Salary


class ParentFields(RosterModel):
    first_name: Text
    surname: Text
    phones: List[Text] = Field(..., min_length=1)
    emails: List[Email] = Field(..., min_length=1)
    document: Text
    address: List[AddressSchema] = Field(..., min_length=1)


# Stored records: the kind's fields plus the id.

class ClassSchema(ClassFields, EntitySchema):
    pass


class StudentSchema(StudentFields, EntitySchema):
    pass


class TeacherSchema(TeacherFields, EntitySchema):
    pass


class ParentSchema(ParentFields, EntitySchema):
    pass
