"""
Enumerations and constants for the Roster platform.
"""

from enum import Enum


class BloodType(str, Enum):
    """ABO/Rh blood groups recorded for students."""
    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"


class Shift(str, Enum):
    """School shift, the last letter of a class code."""
    MORNING = "M"
    AFTERNOON = "T"
    NIGHT = "N"


class EntityKind(str, Enum):
    """Record kinds; the value is also the backing file stem."""
    CLASS = "class"
    STUDENT = "student"
    TEACHER = "teacher"
    PARENT = "parent"

    @property
    def file_name(self) -> str:
        return f"{self.value}.json"
