import json
import uuid

import pytest

from roster.core.entities import Parent, SchoolClass, Student, Teacher
from roster.core.enums import BloodType, Shift
from roster.core.exceptions import ValidationError

from conftest import class_data, parent_data, student_data, teacher_data


class TestSchoolClass:
    def test_assigns_an_id_when_absent(self):
        school_class = SchoolClass(**class_data())
        assert uuid.UUID(school_class.id).version == 4

    def test_adopts_a_given_id(self):
        given = str(uuid.uuid4())
        assert SchoolClass(given, **class_data()).id == given

    def test_to_dict_holds_every_field_and_the_id(self):
        school_class = SchoolClass(**class_data())
        assert school_class.to_dict() == {**class_data(), "id": school_class.id}

    def test_to_json_matches_to_dict(self):
        school_class = SchoolClass(**class_data())
        assert json.loads(school_class.to_json()) == school_class.to_dict()

    def test_from_dict_keeps_identity(self):
        school_class = SchoolClass(**class_data())
        assert SchoolClass.from_dict(school_class.to_dict()) == school_class

    def test_teacher_may_be_null(self):
        assert SchoolClass(**class_data(teacher=None)).teacher is None

    def test_shift_comes_from_the_code(self):
        assert SchoolClass(**class_data(code="2C-T")).shift is Shift.AFTERNOON

    @pytest.mark.parametrize("field,value", [("code", "invalid"), ("teacher", "invalid"), ("code", "1b-M")])
    def test_rejects_invalid_fields(self, field, value):
        with pytest.raises(ValidationError) as exc_info:
            SchoolClass(**class_data(**{field: value}))
        assert [e["path"] for e in exc_info.value.errors] == [field]

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            SchoolClass(**class_data(room="B12"))

    def test_rejects_a_malformed_id(self):
        with pytest.raises(ValidationError):
            SchoolClass("not-a-uuid", **class_data())


class TestStudent:
    def test_optional_lists_serialize_as_null(self):
        student = Student(**student_data())
        data = student.to_dict()
        assert data["medications"] is None
        assert data["allergies"] is None

    def test_round_trip(self):
        student = Student(**student_data(medications=["ibuprofen"], allergies=[]))
        assert Student.from_dict(student.to_dict()) == student

    def test_class_field_is_exposed_as_class_(self):
        student = Student(**student_data())
        assert student.class_ == student_data()["class"]
        assert student.blood_type is BloodType.A_POSITIVE

    def test_accepts_millisecond_timestamps(self):
        student = Student(**student_data(birthDate="2010-10-10T00:00:00.000Z"))
        assert student.to_dict()["birthDate"] == "2010-10-10T00:00:00Z"

    @pytest.mark.parametrize("field,value", [
        ("birthDate", "invalid"),
        ("bloodType", "C+"),
        ("parents", []),
        ("parents", ["invalid"]),
        ("class", None),
    ])
    def test_rejects_invalid_fields(self, field, value):
        with pytest.raises(ValidationError):
            Student(**student_data(**{field: value}))

    def test_reports_every_violation(self):
        with pytest.raises(ValidationError) as exc_info:
            Student(**student_data(birthDate="invalid", bloodType="C+"))
        assert {e["path"] for e in exc_info.value.errors} == {"birthDate", "bloodType"}


class TestTeacher:
    def test_round_trip(self):
        teacher = Teacher(**teacher_data())
        assert Teacher.from_dict(teacher.to_dict()) == teacher

    @pytest.mark.parametrize("field,value", [("hiringDate", "invalid"), ("email", "invalid"), ("salary", 0)])
    def test_rejects_invalid_fields(self, field, value):
        with pytest.raises(ValidationError):
            Teacher(**teacher_data(**{field: value}))

    def test_setter_validates(self):
        teacher = Teacher(**teacher_data())
        with pytest.raises(ValidationError):
            teacher.salary = -5
        assert teacher.salary == 1000


class TestParent:
    def test_to_dict_keeps_address_records(self):
        parent = Parent(**parent_data())
        assert parent.to_dict()["address"] == parent_data()["address"]
        assert parent.address[0].zip_code == "12345678"

    def test_round_trip(self):
        parent = Parent(**parent_data())
        assert Parent.from_dict(parent.to_dict()) == parent

    def test_rejects_invalid_emails(self):
        with pytest.raises(ValidationError):
            Parent(**parent_data(emails=["invalid"]))


class TestUpdate:
    def test_update_reassigns_fields_in_place(self):
        school_class = SchoolClass(**class_data())
        school_class.update({"code": "2C-T"})
        assert school_class.code == "2C-T"

    def test_update_accepts_attribute_names(self):
        teacher = Teacher(**teacher_data())
        teacher.update({"first_name": "Jane"})
        assert teacher.to_dict()["firstName"] == "Jane"

    def test_failed_update_changes_nothing(self):
        teacher = Teacher(**teacher_data())
        before = teacher.to_dict()
        with pytest.raises(ValidationError):
            teacher.update({"firstName": "Jane", "email": "invalid"})
        assert teacher.to_dict() == before

    def test_id_is_immutable(self):
        school_class = SchoolClass(**class_data())
        with pytest.raises(ValidationError):
            school_class.update({"id": str(uuid.uuid4())})


class TestEquality:
    def test_same_fields_different_id_are_not_equal(self):
        assert SchoolClass(**class_data()) != SchoolClass(**class_data())

    def test_kinds_never_compare_equal(self):
        teacher = Teacher(**teacher_data())
        parent = Parent(teacher.id, **parent_data())
        assert teacher != parent


class TestWithChanges:
    def test_returns_a_changed_copy(self):
        school_class = SchoolClass(**class_data())
        changed = school_class.with_changes({"code": "2C-T"})
        assert (changed.id, changed.code) == (school_class.id, "2C-T")
        assert school_class.code == "1B-M"

    def test_rejected_changes_raise(self):
        teacher = Teacher(**teacher_data())
        with pytest.raises(ValidationError):
            teacher.with_changes({"salary": 0})
