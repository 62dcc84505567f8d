"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PizzaId wraps int; an unsaved pizza has no id
    - PizzaSize has exactly three members: Small, Medium, Large

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: stored by value, serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType

PizzaId = NewType("PizzaId", int)


class PizzaSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
