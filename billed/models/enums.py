"""Centralized Enum Definitions"""

import enum


# Domain 1: Session
class UserType(str, enum.Enum):
    """Account types stored in the session at login"""
    EMPLOYEE = "Employee"
    ADMIN = "Admin"


# Domain 2: Bills
class BillStatus(str, enum.Enum):
    """Processing status set by the back office"""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REFUSED = "refused"


class ListingState(str, enum.Enum):
    """States of the bills page"""
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


# Domain 3: Navigation
class Route(str, enum.Enum):
    """Logical view names understood by the navigator"""
    LOGIN = "/"
    BILLS = "#employee/bills"
    NEW_BILL = "#employee/bill/new"
    DASHBOARD = "#admin/dashboard"
