"""Models Package - Export all enums for easy imports"""

from billed.models.enums import BillStatus, ListingState, Route, UserType


__all__ = [
    "BillStatus",
    "ListingState",
    "Route",
    "UserType",
]
