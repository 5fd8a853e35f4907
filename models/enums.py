"""
Shared enumerations used across the project.

Inheriting from str means the values read straight out of settings
("first", "lowest") and typos become immediate errors instead of silent bugs.
"""

import enum


class PriorityLookup(str, enum.Enum):
    FIRST = "first"      # priority of the first match in internal array order
    LOWEST = "lowest"    # smallest priority among all matching entries
