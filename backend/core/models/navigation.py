"""
Navigation menu models.
"""
from typing import List
from pydantic import BaseModel


class MenuItem(BaseModel):
    """Flat menu entry as stored by the CMS. parent == 0 means top level."""
    id: int
    parent: int = 0
    title: str
    url: str


class MenuNode(BaseModel):
    """Top-level entry with its children."""
    item: MenuItem
    children: List[MenuItem] = []

    @property
    def has_children(self) -> bool:
        return bool(self.children)
