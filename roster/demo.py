"""
Demo scenario for the Roster platform.

Runs the services directly against a data directory and walks through the
integrity rules: uniqueness, reference checks, dependency locks and the
missing-teacher case.
"""

import uuid
from pathlib import Path
from typing import Union

from .core.exceptions import ConflictError, DependencyConflictError, MissingDependencyError, NotFoundError
from .services.registry import ServiceRegistry


def run_demo(data_dir: Union[str, Path]):
    """Run a walk-through of the Roster services."""
    print("=" * 60)
    print("ROSTER SCHOOL RECORDS - DEMO")
    print("=" * 60)

    services = ServiceRegistry.from_directory(data_dir)

    print("\n1. Creating a teacher and a parent...")
    teacher = services.teachers.create({
        "firstName": "Ada",
        "surname": "Lovelace",
        "phone": "5511999990000",
        "email": "ada@school.example",
        "document": f"T-{uuid.uuid4().hex[:8]}",
        "hiringDate": "2015-02-01T00:00:00Z",
        "major": "Mathematics",
        "salary": 4200,
    })
    parent = services.parents.create({
        "firstName": "Maria",
        "surname": "Silva",
        "phones": ["5511988887777"],
        "emails": ["maria@family.example"],
        "document": f"P-{uuid.uuid4().hex[:8]}",
        "address": [{"line1": "Rua das Flores 10", "city": "Sao Paulo", "country": "Brazil", "zipCode": "01000-000"}],
    })
    print(f"  teacher {teacher.full_name} ({teacher.id})")
    print(f"  parent  {parent.full_name} ({parent.id})")

    print("\n2. Creating a class...")
    code = next(f"{n}A-M" for n in range(1, 100) if not services.classes.list_by("code", f"{n}A-M"))
    school_class = services.classes.create({"code": code, "teacher": teacher.id})
    print(f"  class {school_class.code} taught by {services.classes.get_teacher(school_class.id).full_name}")

    print("\n3. Integrity checks...")
    try:
        services.classes.create({"code": code, "teacher": None})
    except ConflictError as e:
        print(f"  duplicate code refused: {e.message}")
    try:
        services.classes.create({"code": "99Z-N", "teacher": "00000000-0000-4000-8000-000000000000"})
    except NotFoundError as e:
        print(f"  unknown teacher refused: {e.message}")

    print("\n4. Enrolling a student...")
    student = services.students.create({
        "firstName": "Lucas",
        "surname": "Silva",
        "document": f"S-{uuid.uuid4().hex[:8]}",
        "birthDate": "2012-05-04T00:00:00Z",
        "bloodType": "O+",
        "class": school_class.id,
        "parents": [parent.id],
        "startDate": "2020-02-01T00:00:00Z",
    })
    print(f"  {student.full_name} -> {services.students.get_class(student.id).code}")

    print("\n5. Dependency locks...")
    for service, entity_id in ((services.classes, school_class.id), (services.parents, parent.id)):
        try:
            service.remove(entity_id)
        except DependencyConflictError as e:
            print(f"  {e.message}")

    print("\n6. Clearing the teacher...")
    services.classes.update(school_class.id, {"teacher": None})
    try:
        services.classes.get_teacher(school_class.id)
    except MissingDependencyError as e:
        print(f"  {e.message}")

    print("\n7. Cleaning up...")
    services.students.remove(student.id)
    services.classes.remove(school_class.id)
    services.parents.remove(parent.id)
    services.teachers.remove(teacher.id)
    print(f"  records left: {len(services.classes.list())} classes, {len(services.students.list())} students")

    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)
