"""
Enumerations shared by several schema modules.

Each enum subclasses ``str`` so values compare equal to their plain
string form and serialise as such in JSON.
"""

from enum import Enum


class ServiceType(str, Enum):
    HAND = "hand"
    MACHINE = "machine"
    BOTH = "both"


class YardSizeCategory(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ServiceRequestStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ASSIGNED = "assigned"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BookingStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
