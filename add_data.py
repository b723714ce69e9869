"""
Script to add sample data to the Roster service via its REST API.
Make sure the server is running before executing this script.

Usage:
    python add_data.py
"""

import os
import sys

import requests

from roster.config import Settings


def _console_supports_utf8() -> bool:
    enc = getattr(sys.stdout, "encoding", None)
    return enc is not None and "utf" in enc.lower()


_OK_CHAR = "✓" if _console_supports_utf8() else "[OK]"
_FAIL_CHAR = "✗" if _console_supports_utf8() else "[FAIL]"


def _detect_base_url() -> str:
    """``ROSTER_BASE_URL`` if set, else the address ``roster`` serves on by default."""
    env = os.environ.get("ROSTER_BASE_URL")
    if env:
        return env
    settings = Settings()
    host = "127.0.0.1" if settings.host == "0.0.0.0" else settings.host
    return f"http://{host}:{settings.port}"


BASE_URL = _detect_base_url()


def check_server():
    """Check if the server is running."""
    try:
        response = requests.get(f"{BASE_URL}/health", timeout=2)
        if response.status_code == 200:
            print(f"{_OK_CHAR} Server is running")
            return True
    except requests.exceptions.RequestException:
        pass
    print(f"{_FAIL_CHAR} Server is not running!")
    print("\nPlease start the server first:")
    print("  roster")
    return False


def create(resource, data, label):
    """POST a record and report the outcome."""
    try:
        response = requests.post(f"{BASE_URL}/{resource}", json=data, timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error creating {label}: {e}")
        return None
    if response.status_code == 201:
        record = response.json()
        print(f"{_OK_CHAR} Created {label} ({record['id']})")
        return record
    body = response.json()
    print(f"{_FAIL_CHAR} Failed to create {label}: [{body.get('code')}] {body.get('message')}")
    return None


def list_records(resource):
    """List all records of one kind."""
    response = requests.get(f"{BASE_URL}/{resource}", timeout=5)
    records = response.json() if response.status_code == 200 else []
    print(f"\n{'='*60}")
    print(f"{resource.capitalize()} ({len(records)})")
    print(f"{'='*60}")
    for record in records:
        label = record.get("code") or f"{record.get('firstName')} {record.get('surname')}"
        print(f"  {record['id']} | {label}")
    return records


def main():
    if not check_server():
        sys.exit(1)

    teachers = [
        create("teachers", {
            "firstName": "Ada", "surname": "Lovelace", "phone": "5511999990001",
            "email": "ada@school.example", "document": "11111111100",
            "hiringDate": "2015-02-01T00:00:00Z", "major": "Mathematics", "salary": 4200,
        }, "teacher Ada Lovelace"),
        create("teachers", {
            "firstName": "Alan", "surname": "Turing", "phone": "5511999990002",
            "email": "alan@school.example", "document": "22222222200",
            "hiringDate": "2018-08-01T00:00:00Z", "major": "Computer Science", "salary": 3900,
        }, "teacher Alan Turing"),
    ]

    parent = create("parents", {
        "firstName": "Maria", "surname": "Silva", "phones": ["5511988887777"],
        "emails": ["maria@family.example"], "document": "33333333300",
        "address": [{"line1": "Rua das Flores 10", "city": "Sao Paulo", "country": "Brazil",
                     "zipCode": "01000-000"}],
    }, "parent Maria Silva")

    classes = []
    for code, teacher in (("1A-M", teachers[0]), ("2B-T", teachers[1]), ("3C-N", None)):
        classes.append(create("classes", {"code": code, "teacher": teacher["id"] if teacher else None},
                              f"class {code}"))

    if parent and classes[0]:
        for i, (first_name, blood_type) in enumerate((("Lucas", "O+"), ("Julia", "A-"))):
            create("students", {
                "firstName": first_name, "surname": "Silva", "document": f"4444444440{i}",
                "birthDate": "2012-05-04T00:00:00Z", "bloodType": blood_type,
                "class": classes[0]["id"], "parents": [parent["id"]],
                "startDate": "2020-02-01T00:00:00Z",
            }, f"student {first_name} Silva")

    for resource in ("teachers", "parents", "classes", "students"):
        list_records(resource)


if __name__ == "__main__":
    main()
