"""SQLAlchemy ORM models."""

from hostel_occupancy.models.base import Base
from hostel_occupancy.models.property import Property
from hostel_occupancy.models.assignment import Assignment, AssignmentStatus

__all__ = ["Base", "Property", "Assignment", "AssignmentStatus"]
