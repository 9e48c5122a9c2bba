from typing import Optional
from pydantic import BaseModel

from billed.models.enums import UserType


class UserIdentity(BaseModel):
    """Identity written to the session store at login"""
    type: UserType
    email: Optional[str] = None
