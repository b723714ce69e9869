import uuid

import pytest

from roster.core.entities import Parent, SchoolClass, Student, Teacher
from roster.services.registry import ServiceRegistry

TEACHER_ID = "998a702b-6123-4ae3-b0d7-9d43227f6032"
CLASS_ID = "95c2faa4-8951-4f7b-bdbf-45aedb060583"


def teacher_data(**overrides):
    data = {
        "firstName": "John",
        "surname": "Doe",
        "phone": "12345678900",
        "email": "foo@gmail.com",
        "document": "12345678900",
        "hiringDate": "2010-10-10T00:00:00Z",
        "major": "Math",
        "salary": 1000,
    }
    data.update(overrides)
    return data


def parent_data(**overrides):
    data = {
        "firstName": "Lucas",
        "surname": "Santos",
        "phones": ["123456789"],
        "emails": ["foo@gmail.com"],
        "document": "123456789",
        "address": [
            {
                "line1": "Rua dos Bobos",
                "line2": "Numero 0",
                "city": "Sao Paulo",
                "country": "Brazil",
                "zipCode": "12345678",
            }
        ],
    }
    data.update(overrides)
    return data


def student_data(**overrides):
    data = {
        "firstName": "John",
        "surname": "Doe",
        "document": "12345678900",
        "birthDate": "2010-10-10T00:00:00Z",
        "bloodType": "A+",
        "class": CLASS_ID,
        "parents": [str(uuid.uuid4())],
        "startDate": "2016-02-01T00:00:00Z",
    }
    data.update(overrides)
    return data


def class_data(**overrides):
    data = {"code": "1B-M", "teacher": TEACHER_ID}
    data.update(overrides)
    return data


def dummy_teacher(entity_id=TEACHER_ID, **overrides):
    return Teacher(entity_id, **teacher_data(**overrides))


def dummy_class(entity_id=CLASS_ID, **overrides):
    return SchoolClass(entity_id, **class_data(**overrides))


def dummy_student(entity_id=None, **overrides):
    return Student(entity_id, **student_data(**overrides))


def dummy_parent(entity_id=None, **overrides):
    return Parent(entity_id, **parent_data(**overrides))


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / ".data"


@pytest.fixture
def services(data_dir):
    return ServiceRegistry.from_directory(data_dir)


@pytest.fixture
def teacher(services):
    return services.teachers.create(teacher_data())


@pytest.fixture
def parent(services):
    return services.parents.create(parent_data())


@pytest.fixture
def school_class(services, teacher):
    return services.classes.create(class_data(teacher=teacher.id))


@pytest.fixture
def student(services, school_class, parent):
    return services.students.create(student_data(**{"class": school_class.id, "parents": [parent.id]}))
