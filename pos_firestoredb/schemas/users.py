from typing import List, Optional

from .base import PosEntity


class User(PosEntity):
    name: str
    role_id: str
    email: Optional[str] = None
    pin: Optional[str] = None
    active: Optional[bool] = None


class Role(PosEntity):
    name: str
    permissions: List[str]
