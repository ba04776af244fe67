from typing import List, Optional

from .base import PosEntity, PosRecord


class MenuItemOption(PosRecord):
    name: str
    price: Optional[float] = None


class MenuItem(PosEntity):
    name: str
    price: float
    category_id: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    available: Optional[bool] = None
    options: Optional[List[MenuItemOption]] = None
    tags: Optional[List[str]] = None


class Category(PosEntity):
    name: str
    icon: Optional[str] = None
    sort_order: Optional[int] = None
