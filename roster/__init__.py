"""
Roster: school record keeping over flat JSON files.

Classes, students, teachers and parents, with the referential integrity a
database would normally enforce implemented in the service layer.
"""

__version__ = "1.0.0"
__author__ = "Roster Development Team"
__description__ = "School records service backed by JSON snapshot files"
