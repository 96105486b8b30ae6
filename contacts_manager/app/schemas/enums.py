"""Enumerations shared by request schemas and the query engine."""

from enum import Enum


class GenderOptions(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class SortOrderOptions(str, Enum):
    ASC = "ASC"
    DESC = "DESC"
